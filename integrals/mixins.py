# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name:   Mixins Object
@author: Jack Kirby Cook

"""

import logging
from abc import ABC

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["Mixin", "Logging"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Mixin(ABC):
    def __init_subclass__(cls, *args, **kwargs):
        try: super().__init_subclass__(*args, **kwargs)
        except TypeError: super().__init_subclass__()

    def __new__(cls, *args, **kwargs):
        try: return super().__new__(cls, *args, **kwargs)
        except TypeError: return super().__new__(cls)

    def __init__(self, *args, **kwargs):
        try: super().__init__(*args, **kwargs)
        except TypeError: super().__init__()


class Logging(Mixin):
    def __init_subclass__(cls, *args, **kwargs):
        super().__init_subclass__(*args, **kwargs)
        cls.__title__ = kwargs.get("title", getattr(cls, "__title__", None))

    def __repr__(self): return str(self.name)
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.__title = kwargs.get("title", self.__class__.__title__)
        self.__name = kwargs.get("name", self.__class__.__name__)
        self.__logger = logging.getLogger(self.__class__.__module__)

    def console(self, *strings, **parameters):
        title = parameters.get("title", self.title)
        level = parameters.get("level", logging.INFO)
        string = "|".join(list(strings))
        if not bool(string): string = f"{str(title)}[{repr(self)}]"
        else: string = f"{str(title)}[{repr(self)}]:  {str(string)}"
        self.logger.log(level, string)

    @property
    def logger(self): return self.__logger
    @property
    def title(self): return self.__title
    @property
    def name(self): return self.__name

