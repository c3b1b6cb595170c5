# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name:   Error Objects
@author: Jack Kirby Cook

"""

from integrals.meta import AttributeMeta

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["Error", "InvalidParameterError", "InvalidCoefficientError"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Error(Exception, metaclass=AttributeMeta):
    def __str__(self): return f"{type(self).__name__}|{repr(self.owner)}|{str(self.reason)}"
    def __init__(self, owner, reason):
        super().__init__(owner, reason)
        self.reason = reason
        self.owner = owner


class InvalidParameterError(Error, attribute="Parameter"): pass
class InvalidCoefficientError(Error, attribute="Coefficient"): pass

