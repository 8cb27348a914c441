# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Bespoke error types for quiver.

Exception Hierarchy:

Exception
 └── QuiverError *
     ├── InvalidConfigurationError
     └── ProgrammingError *
         ├── DataError *
         │   ├── ArrayWithMixedTypesError
         │   ├── NullValuesNotSupportedError
         │   └── ShapeMismatchError
         └── ExecutionError *
             ├── ConversionError
             ├── IncompatibleTypesError
             ├── InvalidOperatorError
             ├── RangeError
             ├── UnsupportedTypeError
             └── VariableNotFoundError

* superclasses, these should not be raised directly
"""

from typing import Optional


# ======================== Begin Superclasses ========================
class QuiverError(Exception):
    """Base class of all quiver errors, catch this to catch them all."""


class ProgrammingError(QuiverError):
    """
    Raised for errors in how values are used, e.g. indexing past the end of a
    column or asking for a conversion that doesn't exist.
    """


class DataError(ProgrammingError):
    """Superclass for errors caused by the content of the data."""


class ExecutionError(ProgrammingError):
    """Superclass for errors raised while an operation runs."""


# ======================== End Superclasses ==========================


class InvalidConfigurationError(QuiverError):
    """Exception raised for invalid configuration values."""

    def __init__(self, setting: str, value, message: Optional[str] = None):
        self.setting = setting
        self.value = value
        if message is None:
            message = f"Invalid value `{value}` for `{setting}`."
        super().__init__(message)


# ======================== Begin Data Exceptions ========================
class ArrayWithMixedTypesError(DataError):
    """Exception raised when an array can't be stored because its elements differ in type."""

    def __init__(self, kinds=None, message: Optional[str] = None):
        self.kinds = kinds
        if message is None:
            message = "Vector elements must all be of the same type to be stored in a column"
            if kinds:
                message += f", found {', '.join(sorted(kinds))}."
            else:
                message += "."
        super().__init__(message)


class NullValuesNotSupportedError(DataError):
    """Exception raised when a column holding nulls is presented as a vector."""

    def __init__(self, null_count: int):
        self.null_count = null_count
        message = f"Column has {null_count} null value(s), null values cannot be represented."
        super().__init__(message)


class ShapeMismatchError(DataError):
    """Exception raised when a matrix shape doesn't describe its data."""

    def __init__(self, shape, length: int):
        self.shape = tuple(shape)
        self.length = length
        message = f"Matrix shape {self.shape} does not match data of length {length}."
        super().__init__(message)


# ======================== End Data Exceptions ==========================


# ======================== Begin Execution Exceptions ========================
class RangeError(ExecutionError, IndexError):
    """Exception raised for out of range indexes and slice bounds."""

    def __init__(
        self,
        message: Optional[str] = None,
        begin: Optional[int] = None,
        end: Optional[int] = None,
        length: Optional[int] = None,
    ):
        self.begin = begin
        self.end = end
        self.length = length
        if message is None:
            if end is None:
                message = f"Index {begin} out of range for length {length}."
            else:
                message = f"Slice [{begin}:{end}] out of range for length {length}."
        super().__init__(message)


class UnsupportedTypeError(ExecutionError, TypeError):
    """Exception raised when a value of an unhandled type is encountered."""

    def __init__(self, data_type=None, message: Optional[str] = None):
        self.data_type = data_type
        if message is None:
            message = f"Values of type `{data_type}` are not supported."
        super().__init__(message)


class ConversionError(ExecutionError):
    """Exception raised when a value cannot be converted to the requested form."""

    def __init__(self, source=None, target=None, message: Optional[str] = None):
        self.source = source
        self.target = target
        if message is None:
            message = f"Cannot convert {source} to {target}."
        super().__init__(message)


class IncompatibleTypesError(ExecutionError):
    """Exception raised when an operator is applied to values it can't compare."""

    def __init__(self, left=None, right=None, operator: Optional[str] = None, message=None):
        self.left = left
        self.right = right
        self.operator = operator
        if message is None:
            message = f"Cannot apply `{operator}` to {left} and {right}."
        super().__init__(message)


class InvalidOperatorError(ExecutionError):
    """Exception raised for operators the evaluator does not know."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Unknown binary operator `{operator}`.")


class VariableNotFoundError(ExecutionError):
    """Exception raised when a global is not found."""

    def __init__(self, variable: str = None, suggestion: Optional[str] = None):
        self.variable = variable
        self.suggestion = suggestion
        message = f"Variable '{variable}' is not defined."
        if suggestion is not None:
            message += f" Did you mean '{suggestion}'?"
        super().__init__(message)


# ======================== End Execution Exceptions ==========================
