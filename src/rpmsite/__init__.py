""" Static RPM repository site builder

"""

__version__ = "0.1.0"
