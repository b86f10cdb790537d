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

"""Tests for style reference ID generation."""

import pytest
from awslabs.sitewise_monitor_migration_mcp_server.errors import ConversionError
from awslabs.sitewise_monitor_migration_mcp_server.migration.style import StyleRefIdGenerator, uuid_ref_id


class TestStyleRefIdGenerator:
    """Test cases for StyleRefIdGenerator."""

    def test_default_ids_are_unique(self):
        """Test that the default generator does not repeat IDs."""
        generator = StyleRefIdGenerator()

        ref_ids = [generator.new_ref_id() for _ in range(100)]

        assert len(set(ref_ids)) == 100

    def test_injected_factory_is_used(self, sequential_ref_ids):
        """Test that a deterministic factory controls the IDs."""
        generator = StyleRefIdGenerator(sequential_ref_ids)

        assert [generator.new_ref_id() for _ in range(3)] == ['ref-0', 'ref-1', 'ref-2']

    def test_repeated_id_is_rejected(self):
        """Test that a factory returning the same ID twice fails."""
        generator = StyleRefIdGenerator(lambda: 'same')
        generator.new_ref_id()

        with pytest.raises(ConversionError, match='issued twice'):
            generator.new_ref_id()

    def test_separate_generators_do_not_share_ids(self):
        """Test that uniqueness is scoped to a single generator."""
        first = StyleRefIdGenerator(lambda: 'same')
        second = StyleRefIdGenerator(lambda: 'same')

        assert first.new_ref_id() == second.new_ref_id() == 'same'

    def test_uuid_ref_id_format(self):
        """Test that the default factory returns a UUID string."""
        ref_id = uuid_ref_id()

        assert len(ref_id) == 36
        assert ref_id.count('-') == 4
