#!/usr/bin/env python
''' Discrete Distribution Visualizer - Command line interface.

    Multiple commands are installed:
        distviz: Compare distributions given on the command line
        distvizf: Compare distributions defined in a config (yaml) file
'''
import os
import sys
import logging
import argparse

from distviz import CalculationError
from distviz.project import ProjectVisualizer


def parse_dist(text):
    ''' Parse distribution argument "name; key=value; key=value" into
        the distribution name and dictionary of raw text fields.
    '''
    items = [s.strip() for s in text.split(';') if s.strip()]
    if len(items) == 0:
        raise ValueError('Empty distribution argument')
    name, fields = items[0].lower(), {}
    for item in items[1:]:
        key, sep, value = item.partition('=')
        if not sep:
            raise ValueError(f'Expected key=value in "{item}"')
        fields[key.strip()] = value.strip()
    return name, fields


def _output(proj, args):
    ''' Write the report to args.o in the requested format '''
    fmt = args.f
    oname = getattr(args.o, 'name', '<stdout>')
    if args.o and oname != '<stdout>':
        _, ext = os.path.splitext(str(oname))
        if ext:
            fmt = ext[1:]  # remove '.'

    results = proj.calculate()
    if args.verbose > 1:
        r = results.report.all()
    elif args.verbose > 0:
        r = results.report.summary()
        r.append(results.report.pmf_table())
    else:
        r = results.report.summary()

    if fmt == 'html':
        args.o.write(r.get_html(figfmt='svg'))
    elif fmt == 'md':
        args.o.write(r.get_md(figfmt='svg'))
    else:
        args.o.write(r.get_md(figfmt='text'))


def _add_output_args(parser):
    parser.add_argument('-o', help='Output filename. Extension determines file format.',
                        type=argparse.FileType('w', encoding='UTF-8'), default='-')
    parser.add_argument('-f', help="Output format for when output filename not provided ['txt', 'html', 'md']",
                        type=str, choices=['html', 'txt', 'md'])
    parser.add_argument('--verbose', '-v', help='Verbose mode. Include probability table with one v, '
                        'full report with plot with two.', default=0, action='count')
    parser.add_argument('--debug', help='Print log messages', action='store_true')


def main_setup(args=None):
    ''' Run calculation defined in YAML setup file '''
    parser = argparse.ArgumentParser(prog='distvizf', description='Compare distributions from setup file.')
    parser.add_argument('filename', help='Setup parameter file.', type=str)
    _add_output_args(parser)
    args = parser.parse_args(args=args)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        proj = ProjectVisualizer.from_configfile(args.filename)
    except (OSError, ValueError, CalculationError) as exc:
        parser.error(f'{args.filename}: {exc}')
    if proj is None:
        parser.error(f'Could not read setup file {args.filename}')
    _output(proj, args)


def main_visualize(args=None):
    ''' Compare distributions given on the command line '''
    parser = argparse.ArgumentParser(prog='distviz', description='Compare discrete probability distributions.')
    parser.add_argument('dists', nargs='+', type=str,
                        help='Distributions with parameters separated by semicolons '
                             '(e.g. "poisson; lambda=2" "binomial; n=4; p=0.5")')
    parser.add_argument('--save', help='Save the distributions to a setup file.', type=str)
    _add_output_args(parser)
    args = parser.parse_args(args=args)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    proj = ProjectVisualizer()
    for text in args.dists:
        try:
            name, fields = parse_dist(text)
            proj.model.add(name, fields)
        except (ValueError, CalculationError) as exc:
            parser.error(f'"{text}": {exc}')

    if args.save:
        proj.save_config(args.save)
    _output(proj, args)


if __name__ == '__main__':
    sys.exit(main_visualize())
