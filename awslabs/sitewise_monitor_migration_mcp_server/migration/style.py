# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Style reference IDs for application chart series."""

import uuid
from awslabs.sitewise_monitor_migration_mcp_server.errors import ConversionError
from typing import Callable, Optional, Set


RefIdFactory = Callable[[], str]


def uuid_ref_id() -> str:
    """Generate a random style reference ID."""
    return str(uuid.uuid4())


class StyleRefIdGenerator:
    """Issues style reference IDs that are unique within one conversion.

    The ID source is injectable so callers can swap the random default for a
    deterministic sequence.
    """

    def __init__(self, factory: Optional[RefIdFactory] = None):
        """Initialize the generator with an ID factory, uuid4 by default."""
        self._factory = factory or uuid_ref_id
        self._issued: Set[str] = set()

    def new_ref_id(self) -> str:
        """Return a reference ID not issued before by this generator."""
        ref_id = self._factory()
        if ref_id in self._issued:
            raise ConversionError(f'Style reference ID "{ref_id}" was issued twice')
        self._issued.add(ref_id)
        return ref_id
