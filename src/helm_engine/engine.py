# Copyright 2023 Petuum, Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License."

from abc import ABC, abstractmethod
import logging

from .constants import LOG_LEVEL, LOGGING_FORMAT, MANIFEST_SUFFIX
from .manifests import add_owner_refs
from .objects.owner_reference import normalize_owner_references
from .utils.classes import RenderPhase
from .utils.logger import EngineLogger

logging.basicConfig(format=LOGGING_FORMAT)
LOG = logging.getLogger(__name__)
LOG.setLevel(LOG_LEVEL)


class RenderEngine(ABC):
    """
    Anything that renders a chart with a set of values into manifest files.

    Engines do not need to inherit from this class: any object with a
    callable `render` attribute passes `isinstance(obj, RenderEngine)`.
    """

    @abstractmethod
    def render(self, chart, values):
        """
        Render `chart` with `values`.

        returns:
            dict mapping output file names to rendered text
        raises:
            whatever the engine raises when the chart cannot be rendered
        """
        return

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is RenderEngine:
            return callable(getattr(subclass, "render", None))
        return NotImplemented


class OwnerRefEngine(RenderEngine):
    """
    Wraps a render engine, adding owner references to every rendered manifest.

    Only files ending in the manifest suffix are kept, and files holding no
    document at all are dropped. The first error aborts the whole render.
    """
    def __init__(self, base_engine, owner_references, log_level=LOG_LEVEL):
        if not callable(getattr(base_engine, "render", None)):
            raise TypeError(f"{type(base_engine).__name__} has no render method")
        self._base_engine = base_engine
        self._owner_references = normalize_owner_references(owner_references)
        self._log_level = log_level
        self._logger = EngineLogger(LOG, {"owner_references": self._owner_references})

    @property
    def base_engine(self):
        return self._base_engine

    @property
    def owner_references(self):
        return self._owner_references

    def render(self, chart, values):
        rendered = self._base_engine.render(chart, values)

        owned_rendered_files = {}
        for file_name, rendered_file in rendered.items():
            if not file_name.endswith(MANIFEST_SUFFIX):
                continue
            self._logger.log(self._log_level, f"adding ownerrefs to file: {file_name}",
                             extra={"phase": RenderPhase.INJECTION})
            with_owner = self.add_owner_refs(rendered_file, file_name)
            if not with_owner:
                self._logger.log(self._log_level, f"skipping empty template: {file_name}",
                                 extra={"phase": RenderPhase.INJECTION})
                continue
            owned_rendered_files[file_name] = with_owner
        return owned_rendered_files

    def add_owner_refs(self, file_contents, file_name=None):
        """Add the configured owner references to all documents of one rendered file"""
        return add_owner_refs(file_contents, self._owner_references, file_name)


def new_owner_ref_engine(base_engine, owner_references):
    """Create an `OwnerRefEngine` adding `owner_references` to the assets of `base_engine`"""
    return OwnerRefEngine(base_engine, owner_references)
