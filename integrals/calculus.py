# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name:   Calculus Objects
@author: Jack Kirby Cook

"""

import io
import numbers
import logging
import numpy as np
from abc import ABC, abstractmethod

from integrals.meta import AttributeMeta
from integrals.mixins import Logging
from integrals.errors import Error
from integrals.decorators import TypeDispatcher

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["Function", "PolynomialFunction", "Integrator", "AnalyticalIntegrator", "RiemannIntegrator"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Function(ABC, metaclass=AttributeMeta):
    def __call__(self, x): return self.evaluate(x)
    def __str__(self):
        sink = io.StringIO()
        self.print(sink)
        return sink.getvalue()

    @abstractmethod
    def evaluate(self, x): pass
    @abstractmethod
    def antiderivative(self): pass
    @abstractmethod
    def print(self, sink): pass


class PolynomialFunction(Function, attribute="Polynomial"):
    """Polynomial held as coefficients in increasing powers of x, c0 + c1*x + ... + cn*x^n."""

    def __init__(self, coefficients=()):
        if isinstance(coefficients, np.ndarray): coefficients = coefficients.tolist()
        self.__coefficients = tuple()
        self.__coefficients = tuple([self.coefficient(value) for value in coefficients])

    def __repr__(self): return f"{type(self).__name__}[{', '.join([f'{value:g}' for value in self.coefficients])}]"
    def __eq__(self, other): return isinstance(other, PolynomialFunction) and self.coefficients == other.coefficients
    def __hash__(self): return hash(self.coefficients)
    def __len__(self): return len(self.coefficients)

    def coefficient(self, value):
        if not isinstance(value, numbers.Real): raise Error.Coefficient(self, f"coefficient={value!r}")
        if not np.isfinite(value): raise Error.Coefficient(self, f"coefficient={value!r}")
        return float(value)

    @TypeDispatcher(locator=0)
    def evaluate(self, x): raise TypeError(type(x))

    @evaluate.register(int, float, np.number)
    def __scalar(self, x):
        x = np.float64(x)
        result = np.float64(0.0)
        with np.errstate(over="ignore", invalid="ignore"):
            for power, coefficient in enumerate(self.coefficients):
                result += coefficient * np.power(x, power)
        return float(result)

    @evaluate.register(np.ndarray)
    def __array(self, x):
        x = np.asarray(x, dtype=np.float64)
        result = np.zeros_like(x)
        with np.errstate(over="ignore", invalid="ignore"):
            for power, coefficient in enumerate(self.coefficients):
                result = result + coefficient * np.power(x, power)
        return result

    @evaluate.register(list, tuple)
    def __collection(self, x): return self.evaluate(np.asarray(x, dtype=np.float64))

    def antiderivative(self):
        coefficients = [coefficient / (power + 1) for power, coefficient in enumerate(self.coefficients)]
        return PolynomialFunction([0.0] + coefficients)

    def print(self, sink):
        # zero and negative terms are written as is, powers as c*x^i rather than the bare cx^i
        terms = [f"{coefficient:g}" if not power else f"{coefficient:g}*x^{power}" for power, coefficient in enumerate(self.coefficients)]
        sink.write(" + ".join(terms) + "\n")

    @property
    def degree(self): return len(self.coefficients) - 1
    @property
    def coefficients(self): return self.__coefficients


class Integrator(Logging, ABC, metaclass=AttributeMeta, title="Integrated"):
    def __init_subclass__(cls, *args, **kwargs):
        super().__init_subclass__(*args, **kwargs)
        cls.__label__ = kwargs.get("label", getattr(cls, "__label__", None))

    def __call__(self, function, a, b): return self.integrate(function, a, b)
    def integrate(self, function, a, b):
        if not isinstance(function, Function): raise TypeError(type(function))
        a, b = float(a), float(b)
        if not bool(b > a): self.console(f"{a:g}|{b:g}", "reversed bounds", level=logging.WARNING)
        result = self.calculate(function, a, b)
        self.console(f"{a:g}|{b:g}", f"{result:g}")
        return result

    @abstractmethod
    def calculate(self, function, a, b): pass

    def print(self, sink): sink.write(str(self.label))

    @property
    def label(self): return self.__class__.__label__


class AnalyticalIntegrator(Integrator, attribute="Analytical", label="Analytical"):
    def calculate(self, function, a, b):
        antiderivative = function.antiderivative()
        return antiderivative.evaluate(b) - antiderivative.evaluate(a)


class RiemannIntegrator(Integrator, attribute="Riemann", label="Riemann Sum"):
    """Trapezoid rule over fixed steps of width h.

    The count of steps is int((b - a) / h), so any partial step left at b is dropped,
    and reversed or too narrow bounds integrate to zero.
    """

    def __init__(self, step=0.001, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if isinstance(step, bool) or not isinstance(step, numbers.Real): raise Error.Parameter(self, f"step={step!r}")
        if not np.isfinite(step) or not bool(step > 0): raise Error.Parameter(self, f"step={step!r}")
        self.__step = float(step)

    def calculate(self, function, a, b):
        count = int((b - a) / self.step)
        total = 0.0
        for index in range(count):
            x1 = a + index * self.step
            x2 = x1 + self.step
            y1 = function.evaluate(x1)
            y2 = function.evaluate(x2)
            total += (x2 - x1) * ((y1 + y2) / 2)
        return total

    @property
    def step(self): return self.__step

