''' Parameter entry validation

Distribution parameters are typed into text boxes, so they arrive as strings.
A Schema holds an ordered list of Fields, and each Field checks its text
against an ordered list of rules. Validation stops at the first rule that
fails and raises ValidationError with that rule's message.

Example:

    >>> schema = Schema(Field('x', required='Enter x', invalid='x must be a number',
    ...                       rules=[(lambda v: v > 0, 'x must be positive')]))
    >>> schema.validate({'x': '2.5'})
    {'x': 2.5}
'''

import math


class ValidationError(ValueError):
    ''' Parameter text could not be converted to a valid distribution parameter

        Args:
            message (str): Human-readable description of the first failed rule
            field (str): Name of the field that failed
    '''
    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


def parse_number(text):
    ''' Convert text to a finite float. Returns None if the text is not a number. '''
    text = str(text).strip()
    if '_' in text:  # float() allows digit grouping like 1_000
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def is_integer(value):
    return float(value).is_integer()


class Field:
    ''' A single numeric text entry

        Args:
            name (str): Key of the field in the raw input mapping
            required (str): Message when the field is empty
            invalid (str): Message when the text is not a finite number
            rules (list): List of (predicate, message) tuples checked in order
                on the parsed value
            convert (callable): Applied to the value once all rules pass
    '''
    def __init__(self, name, required, invalid, rules=None, convert=float):
        self.name = name
        self.required = required
        self.invalid = invalid
        self.rules = list(rules) if rules is not None else []
        self.convert = convert

    def parse(self, text):
        ''' Parse and check the text, returning the converted value '''
        if text is None or text == '':
            raise ValidationError(self.required, self.name)

        value = parse_number(text)
        if value is None:
            raise ValidationError(self.invalid, self.name)

        for check, message in self.rules:
            if not check(value):
                raise ValidationError(message, self.name)
        return self.convert(value)


class Schema:
    ''' Ordered collection of Fields for one distribution type '''
    def __init__(self, *fields):
        self.fields = list(fields)

    def validate(self, raw):
        ''' Validate the raw text values

            Args:
                raw (dict): Mapping of field name to entered text. Fields not
                    used by this schema are ignored.

            Returns:
                params (dict): Mapping of field name to parsed value

            Raises:
                ValidationError: on the first rule that fails
        '''
        params = {}
        for fld in self.fields:
            params[fld.name] = fld.parse(raw.get(fld.name, ''))
        return params


poisson_schema = Schema(
    Field('lambda',
          required='Please enter lambda for Poisson distribution',
          invalid='Lambda must be a valid number',
          rules=[(lambda v: v > 0, 'Lambda must be positive')]),
)

binomial_schema = Schema(
    Field('n',
          required='Please enter number of trials (n)',
          invalid='Number of trials must be a valid number',
          rules=[(lambda v: v > 0, 'Number of trials must be positive'),
                 (is_integer, 'Number of trials must be an integer')],
          convert=int),
    Field('p',
          required='Probability is required',
          invalid='Probability must be a number',
          rules=[(lambda v: 0 <= v <= 1, 'Probability must be between 0 and 1')]),
)
