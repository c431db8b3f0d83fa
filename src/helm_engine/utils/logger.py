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

import logging

from .classes import RenderPhase


class EngineLogger(logging.LoggerAdapter):
    """provides logging with engine specific information (owners, phase, etc)"""
    def process(self, msg, kwargs):
        owner_references = self.extra.get("owner_references")
        if owner_references:
            owners = ",".join(f"{ref.kind}/{ref.name}" for ref in owner_references)
        else:
            owners = "None"
        if "extra" in kwargs:
            phase = kwargs["extra"].get("phase", RenderPhase.NONE)
        else:
            phase = RenderPhase.NONE

        msg = f'owners={owners} phase={phase} : message="{msg}"'

        return msg, kwargs
