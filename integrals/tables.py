# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name:   Tables Objects
@author: Jack Kirby Cook

"""

import sys
import numpy as np
import pandas as pd
from collections import namedtuple as ntuple

from integrals.mixins import Logging
from integrals.calculus import Function, Integrator

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["Layout", "Renderer", "Table"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Layout(ntuple("Layout", "width space precision")):
    def __new__(cls, width=80, space=12, precision=6): return super().__new__(cls, width, space, precision)


class Renderer(object):
    def __init__(self, *args, layout=None, **kwargs):
        self.__layout = layout if layout is not None else Layout()

    def __call__(self, dataframe):
        assert isinstance(dataframe, pd.DataFrame)
        if bool(dataframe.empty): return ""
        numbers = {"float_format": lambda value: f"{value:.{self.layout.precision}g}"}
        layout = {"line_width": self.layout.width, "col_space": self.layout.space}
        boundary = str("=") * int(self.layout.width)
        string = dataframe.to_string(**numbers, **layout)
        strings = [boundary, string, boundary] if bool(string) else []
        string = ("\n".join(strings) + "\n") if bool(strings) else ""
        return string

    @property
    def layout(self): return self.__layout


class Table(Logging, title="Tabulated"):
    """Cross product of functions and integrators over the bounds [a, b].

    Printed rows keep the newline written by each function ahead of its results,
    so one row reads '<function>\\n<result>;<result>;\\n'.
    """

    def __init__(self, functions, integrators, *args, renderer=None, **kwargs):
        functions, integrators = list(functions), list(integrators)
        assert all([isinstance(function, Function) for function in functions])
        assert all([isinstance(integrator, Integrator) for integrator in integrators])
        super().__init__(*args, **kwargs)
        self.__renderer = renderer if renderer is not None else Renderer()
        self.__integrators = tuple(integrators)
        self.__functions = tuple(functions)

    def __call__(self, a, b, sink=None):
        sink = sink if sink is not None else sys.stdout
        self.print(sink, a, b)

    def __len__(self): return len(self.functions)

    def rows(self, a, b):
        for function in self.functions:
            results = [integrator.integrate(function, a, b) for integrator in self.integrators]
            self.console(repr(function), *[f"{result:g}" for result in results])
            yield function, results

    def print(self, sink, a, b):
        for function, results in self.rows(a, b):
            function.print(sink)
            for result in results:
                sink.write(f"{result:g};")
            sink.write("\n")

    def dataframe(self, a, b):
        columns = [str(integrator.label) for integrator in self.integrators]
        index, records = [], []
        for function, results in self.rows(a, b):
            index.append(str(function).rstrip("\n"))
            records.append(list(results))
        index = pd.Index(index, name="function")
        return pd.DataFrame(records, index=index, columns=columns, dtype=np.float64)

    def render(self, a, b): return self.renderer(self.dataframe(a, b))

    @property
    def integrators(self): return self.__integrators
    @property
    def functions(self): return self.__functions
    @property
    def renderer(self): return self.__renderer

