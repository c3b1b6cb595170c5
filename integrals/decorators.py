# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name    Method Dispatchers
@author: Jack Kirby Cook

"""

import copy
from abc import ABC, abstractmethod
from functools import update_wrapper

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["Decorator", "TypeDispatcher"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Decorator(object):
    def __init__(self, *args, **kwargs):
        self.__wrapped__ = None
        self.__self__ = None

    def __call__(self, *args, **kwargs):
        if self.function is None: return self.wrapper(*args, **kwargs)
        if self.instance is None: return self.decorator(*args, **kwargs)
        else: return self.decorator(self.instance, *args, **kwargs)

    def __get__(self, instance, owner):
        if instance is None: return self
        bounded = copy.copy(self)
        bounded.instance = instance
        attribute = self.function.__name__
        setattr(instance, attribute, bounded)
        return bounded

    def wrapper(self, function):
        assert callable(function)
        update_wrapper(self, function)
        return self

    def decorator(self, *args, **kwargs):
        return self.function(*args, **kwargs)

    @property
    def function(self): return self.__wrapped__
    @property
    def instance(self): return self.__self__
    @instance.setter
    def instance(self, instance): self.__self__ = instance


class Dispatcher(Decorator, ABC):
    def __init__(self, *args, locator, **kwargs):
        assert isinstance(locator, (int, str))
        super().__init__(*args, **kwargs)
        self.__locator = locator
        self.__registry = dict()

    def decorator(self, *args, **kwargs):
        method = bool(self.instance is not None)
        if isinstance(self.locator, int): content = args[self.locator + int(method)]
        elif isinstance(self.locator, str): content = kwargs.get(self.locator, None)
        else: raise TypeError(type(self.locator))
        locator = self.locate(content)
        function = self.registry.get(locator, self.function)
        return function(*args, **kwargs)

    def register(self, *locators):
        def decorator(function):
            assert callable(function)
            registry = {locator: function for locator in locators}
            self.registry.update(registry)
            return function
        return decorator

    @abstractmethod
    def locate(self, content): pass

    @property
    def registry(self): return self.__registry
    @property
    def locator(self): return self.__locator


class TypeDispatcher(Dispatcher):
    def locate(self, content):
        bases = [base for base in type(content).__mro__ if base in self.registry.keys()]
        return bases[0] if bool(bases) else None

