import logging
from dataclasses import dataclass
from functools import cache, cached_property
from pathlib import Path
from typing import Dict, FrozenSet, List

import yaml

from wordcase.boundaries import Boundary
from wordcase.connections import CaseTableSource
from wordcase.errors import CaseTableError
from wordcase.patterns import Pattern

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CasePreset:
    """
    The fixed (boundaries, pattern, delimiter) triple behind one `Case`.

    Args:
        name: `Case` member name
        pattern: Pattern applied when converting to the case
        delim: Delimiter words are joined with
        boundaries: Boundaries used when converting from the case
    """
    name: str
    pattern: Pattern
    delim: str
    boundaries: FrozenSet[Boundary]

class CaseTable(CaseTableSource):
    def __init__(self, file_path = None):
        file_path = file_path or self.yaml_path()
        logger.debug("Loading case table from %s", file_path)

        path = Path(file_path) if isinstance(file_path, str) else file_path
        try:
            with path.open('r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CaseTableError(f"could not read case table {file_path}", e) from e

        if not isinstance(data, dict) or not isinstance(data.get('cases'), dict):
            raise CaseTableError(f"case table {file_path} has no 'cases' mapping")

        self.presets: Dict[str, CasePreset] = {
            name: self._parse_preset(name, yml) for name, yml in data['cases'].items()
        }

    @staticmethod
    def _parse_preset(name, yml) -> CasePreset:
        if not isinstance(yml, dict):
            raise CaseTableError(f"case {name!r} must be a mapping")
        missing = {'pattern', 'delim', 'boundaries'} - yml.keys()
        if missing:
            raise CaseTableError(f"case {name!r} is missing {sorted(missing)}")
        if not isinstance(yml['delim'], str):
            raise CaseTableError(f"case {name!r} delim must be a string")
        if not isinstance(yml['boundaries'], list):
            raise CaseTableError(f"case {name!r} boundaries must be a list")
        try:
            return CasePreset(
                name = name,
                pattern = Pattern[yml['pattern']],
                delim = yml['delim'],
                boundaries = frozenset(Boundary[b] for b in yml['boundaries'])
            )
        except (KeyError, TypeError) as e:
            raise CaseTableError(f"case {name!r} names an unknown pattern or boundary", e) from e

    @cached_property
    def names(self) -> List[str]:
        return list(self.presets)

    def preset(self, name: str) -> CasePreset:
        try:
            return self.presets[name]
        except KeyError:
            raise CaseTableError(f"case table has no entry for {name!r}") from None

@cache
def case_table() -> CaseTable:
    """ The packaged case table, loaded on first use """
    return CaseTable()
