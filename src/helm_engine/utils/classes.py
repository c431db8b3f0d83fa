# Copyright 2023 Petuum, Inc. All Rights Reserved.

import copy
from enum import Enum


class RenderPhase(Enum):
    """Enum describing the phases of a single render call"""
    NONE = "None"
    INJECTION = "Injection"

    def __str__(self):
        return self.value


class BaseError(Exception):
    def __init__(self, errors):
        super().__init__(errors)
        self._errors = errors

    @property
    def errors(self):
        try:
            return copy.deepcopy(self._errors)
        except TypeError:
            return self._errors


class ValidationError(BaseError):
    """
    Class representing invalid owner references handed to the engine.

    Every problem found is collected, so a single raise reports all of them.
    """
    def __init__(self, errors):
        super().__init__(errors)

    def __str__(self):
        result = "The following errors occured during validation:\n"
        for error in sorted(str(error) for error in self._errors):
            result += error
            result += "\n\n"
        return result


class InjectionError(BaseError):
    """
    Base class for failures while adding owner references to a rendered file.

    Any of these aborts the file and the render call it belongs to.
    """
    prefix = "error adding ownerrefs"

    def __init__(self, errors, file_name=None):
        super().__init__(errors)
        self.file_name = file_name

    def __str__(self):
        details = "; ".join(str(error) for error in self._errors)
        if self.file_name:
            return f"{self.prefix} to {self.file_name}: {details}"
        return f"{self.prefix}: {details}"


class ManifestParseError(InjectionError):
    """A document of a rendered file is not valid YAML or JSON"""
    prefix = "error parsing rendered template to add ownerrefs"


class ManifestConversionError(InjectionError):
    """A document parses but is not shaped like a kubernetes object"""
    prefix = "error converting rendered template to add ownerrefs"


class ManifestSerializationError(InjectionError):
    """A document with owner references could not be encoded back to YAML"""
    prefix = "error serializing manifest with ownerrefs"
