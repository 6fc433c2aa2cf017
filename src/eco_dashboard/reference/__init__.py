"""Static dashboard reference data.

Data that doesn't change with API calls: the Alberta bird and birding-site
tables used by the bird fallback, the station coordinate table that decides
which hydrometric stations are in scope, status thresholds and query limits.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from eco_dashboard.reference.birds import ALBERTA_BIRDING_SITES as ALBERTA_BIRDING_SITES
from eco_dashboard.reference.birds import ALBERTA_BIRDS as ALBERTA_BIRDS
from eco_dashboard.reference.birds import BirdingSite as BirdingSite
from eco_dashboard.reference.birds import ReferenceSpecies as ReferenceSpecies
from eco_dashboard.reference.limits import DEFAULT_MAX_RESULTS as DEFAULT_MAX_RESULTS
from eco_dashboard.reference.limits import MAX_RESULTS_CAP as MAX_RESULTS_CAP
from eco_dashboard.reference.stations import ALBERTA_STATIONS as ALBERTA_STATIONS
from eco_dashboard.reference.stations import StationInfo as StationInfo
from eco_dashboard.reference.thresholds import DISCHARGE_LADDER as DISCHARGE_LADDER
from eco_dashboard.reference.thresholds import WATER_LEVEL_LADDER as WATER_LEVEL_LADDER
