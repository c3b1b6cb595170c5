# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026
@name:   Integration Example
@author: Jack Kirby Cook

"""

import sys
import logging

from integrals.meta import ParameterMeta
from integrals.calculus import Function, Integrator
from integrals.tables import Table

__version__ = "1.0.0"
__author__ = "Jack Kirby Cook"
__all__ = ["Example", "main"]
__copyright__ = "Copyright 2026, Jack Kirby Cook"
__license__ = "MIT License"


class Example(metaclass=ParameterMeta):
    coefficients = [2, 0, 0, 4, 0, 0, 0, 5]
    bounds = (0.5, 1.5)
    integrators = {"Analytical": {}, "Riemann": {"step": 0.001}}


def main(*args, sink=None, **kwargs):
    parameters = dict(Example.parameters) | dict(kwargs)
    functions = [Function.Polynomial(parameters["coefficients"])]
    integrators = [Integrator[attribute](**values) for attribute, values in parameters["integrators"].items()]
    table = Table(functions, integrators)
    table(*parameters["bounds"], sink=sink)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s, %(threadName)s]:  %(message)s", stream=sys.stderr)
    main()

