"""
Domain errors raised by the assignment pipeline.
All of them are raised before anything is persisted.
"""

from typing import Optional

INVALID_PARAM = "One or more of the parameters is invalid."
ADDRESS_NOT_EQUAL = "The address of the restaurant and the customer must be equal!"
NO_AVAILABLE_DRIVER = "No available driver is free at the moment."


class DispatchError(Exception):
    """Base class for assignment failures surfaced to callers."""

    default_message = "Dispatch failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgumentError(DispatchError, ValueError):
    """Customer, restaurant or delivery time is missing."""

    default_message = INVALID_PARAM


class CityMismatchError(DispatchError):
    """Customer and restaurant are based in different cities."""

    default_message = ADDRESS_NOT_EQUAL


class NoAvailableDriverError(DispatchError):
    """Every driver in the city is already booked at the requested time."""

    default_message = NO_AVAILABLE_DRIVER
