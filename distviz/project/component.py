''' Project Components, for managing a single calculation and its configuration file. '''

import logging
import yaml


class ProjectComponent:
    ''' Base class for project components '''
    def __init__(self, name=None):
        self.name = name
        self.description = ''
        self._result = None

    @property
    def result(self):
        ''' Calculation result '''
        if self._result is None:
            self.calculate()
        return self._result

    def calculate(self):
        ''' Calculate the result '''
        # Subclass this

    def get_config(self):
        ''' Get configuration dictionary. Subclass this. '''
        return {'name': self.name,
                'desc': self.description}

    def load_config(self, config):
        ''' Load configuration into project component. Subclass this. '''

    @classmethod
    def from_config(cls, config):
        ''' Create new project component from the config dictionary '''
        proj = cls()
        proj.load_config(config)
        return proj

    def save_config(self, fname):
        ''' Save configuration to file.

            Args:
                fname: File name or open file object to write configuration to
        '''
        d = [self.get_config()]  # List allows several calculations in one file
        out = yaml.safe_dump(d, default_flow_style=False, allow_unicode=True, sort_keys=False)

        try:
            fname.write(out)
        except AttributeError:
            with open(fname, 'w', encoding='utf-8') as f:
                f.write(out)

    @classmethod
    def from_configfile(cls, fname):
        ''' Read and parse the configuration file.

            Args:
                fname: File name or open file object to read configuration from

            Returns:
                New ProjectComponent instance, or None if the file
                could not be read as YAML
        '''
        try:
            try:
                yml = fname.read()  # fname is file object
            except AttributeError:
                with open(fname, 'r', encoding='utf-8') as fobj:  # fname is string
                    yml = fobj.read()
        except UnicodeDecodeError:
            logging.warning('Config file %s is not a text file', fname)
            return None

        try:
            config = yaml.safe_load(yml)
        except yaml.YAMLError as exc:
            logging.warning('Could not parse config file %s: %s', fname, exc)
            return None

        if isinstance(config, list):
            config = config[0]
        if not isinstance(config, dict):
            logging.warning('Config file %s does not define a calculation', fname)
            return None

        return cls.from_config(config)
