# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name:   MetaTypes
@author: Jack Kirby Cook

"""

import types
from abc import ABCMeta

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["AttributeMeta", "ParameterMeta"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Meta(ABCMeta):
    def __init_subclass__(mcs, *args, **kwargs):
        try: return super(Meta, mcs).__init_subclass__(*args, **kwargs)
        except TypeError: return super(Meta, mcs).__init_subclass__()

    def __new__(mcs, name, bases, attrs, *args, **kwargs):
        try: return super(Meta, mcs).__new__(mcs, name, bases, attrs, *args, **kwargs)
        except TypeError: return super(Meta, mcs).__new__(mcs, name, bases, attrs)

    def __init__(cls, *args, **kwargs):
        try: super(Meta, cls).__init__(*args, **kwargs)
        except TypeError: super(Meta, cls).__init__()


class AttributeMeta(Meta):
    def __init__(cls, name, bases, attrs, *args, **kwargs):
        super(AttributeMeta, cls).__init__(name, bases, attrs, *args, **kwargs)
        function = lambda base: type(base) is AttributeMeta or issubclass(type(base), AttributeMeta)
        if not any([function(base) for base in bases]) or bool(kwargs.get("root", False)):
            assert "attribute" not in kwargs.keys()
            cls.__root__ = cls
            cls.__attributes__ = dict()
        attribute = kwargs.get("attribute", None)
        if attribute is None: return
        assert isinstance(attribute, str)
        assert attribute not in cls.root.attributes.keys()
        cls.root.attributes[attribute] = cls
        setattr(cls.root, attribute, cls)

    def __contains__(cls, attribute): return attribute in cls.attributes.keys()
    def __getitem__(cls, attribute): return cls.attributes[attribute]

    @property
    def attributes(cls): return cls.__attributes__
    @property
    def root(cls): return cls.__root__


class ParameterMeta(Meta):
    def __iter__(cls): return iter(cls.parameters.items())
    def __getitem__(cls, key): return cls.parameters[key]
    def __init__(cls, name, bases, attrs, *args, **kwargs):
        super(ParameterMeta, cls).__init__(name, bases, attrs, *args, **kwargs)
        dunder = lambda attribute: str(attribute).startswith('__') and str(attribute).endswith('__')
        function = lambda value: isinstance(value, (types.FunctionType, classmethod, staticmethod, property))
        parameters = dict(getattr(cls, "__parameters__", {}))
        for key, value in attrs.items():
            if dunder(key) or function(value): continue
            elif isinstance(value, dict) and isinstance(parameters.get(key, None), dict): parameters[key] = parameters[key] | value
            else: parameters[key] = value
        cls.__parameters__ = dict(parameters)

    @property
    def parameters(cls): return cls.__parameters__

