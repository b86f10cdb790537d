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

"""Exceptions raised while converting SiteWise Monitor dashboard definitions."""

from typing import Optional


class ConversionError(Exception):
    """Base exception for dashboard definition conversion failures.

    The converter sets ``widget_index`` to the position of the widget that
    failed, so callers can point users at the offending widget.
    """

    error_code = 'ConversionError'

    def __init__(self, message: str, widget_index: Optional[int] = None):
        """Initialize the error with a message and an optional widget index."""
        super().__init__(message)
        self.message = message
        self.widget_index = widget_index

    def __str__(self) -> str:
        """Prefix the message with the failing widget position when known."""
        if self.widget_index is None:
            return self.message
        return f'Widget {self.widget_index}: {self.message}'


class UnsupportedWidgetTypeError(ConversionError):
    """Raised when a Monitor widget type has no application counterpart."""

    error_code = 'UnsupportedWidgetType'

    def __init__(self, widget_type: str, widget_index: Optional[int] = None):
        """Initialize the error with the unsupported widget type."""
        super().__init__(f'Unsupported widget type "{widget_type}"', widget_index)
        self.widget_type = widget_type


class MalformedMetricError(ConversionError):
    """Raised when a widget metric cannot be turned into an asset property query."""

    error_code = 'MalformedMetric'

    def __init__(
        self,
        message: str,
        metric_index: Optional[int] = None,
        widget_index: Optional[int] = None,
    ):
        """Initialize the error with the position of the offending metric."""
        if metric_index is not None:
            message = f'Metric {metric_index}: {message}'
        super().__init__(message, widget_index)
        self.metric_index = metric_index
