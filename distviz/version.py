''' distviz version information '''

__version__ = '1.0.2'
__date__ = '19-Oct-2026'
