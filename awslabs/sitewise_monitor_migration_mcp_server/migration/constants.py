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

"""Constants for SiteWise Monitor to application dashboard conversion."""

# Pixel size of one Monitor grid unit in the application layout.
# A 3x3 Monitor widget becomes 99x42 pixels.
GRID_UNIT_WIDTH = 33
GRID_UNIT_HEIGHT = 14

# Application widgets are 2-D; z is reserved for stacking.
DEFAULT_Z_INDEX = 0

# Property query defaults. No other aggregation or resolution is migrated.
DEFAULT_AGGREGATION_TYPE = 'AVERAGE'
DEFAULT_RESOLUTION = '1m'

# Application widget types
APP_WIDGET_XY_PLOT = 'xy-plot'
APP_WIDGET_BAR_CHART = 'bar-chart'

# XY plot presentation defaults
CONNECTION_STYLE_LINEAR = 'linear'
CONNECTION_STYLE_NONE = 'none'
LINE_STYLE_SOLID = 'solid'
SYMBOL_STYLE_FILLED_CIRCLE = 'filled-circle'

# Metric source used by SiteWise Monitor
SITEWISE_METRIC_SOURCE = 'iotsitewise'
