"""Resolution options and document-kind defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Final, Mapping

from jominiscope.registry import DEFAULT_OBJECT_TYPE, ObjectType

ROOT_OBJECT_TYPE_BY_FOLDER: Final[Mapping[str, ObjectType]] = MappingProxyType(
    {
        "common/landed_titles": "landed_title",
        "common/religion": "faith",
        "common/culture": "culture",
        "common/dynasties": "dynasty",
        "common/dynasty_houses": "dynasty_house",
        "common/artifacts": "artifact",
        "common/schemes": "scheme",
        "common/secret_types": "secret",
        "common/story_cycles": "story",
        "common/activities": "activity",
        "common/casus_belli_types": "casus_belli",
        "common/factions": "faction",
    }
)


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    """Inputs of a position resolution that do not come from the document text."""

    initial_object_type: ObjectType = DEFAULT_OBJECT_TYPE

    @staticmethod
    def for_path(path: str) -> "ResolveOptions":
        """Pick the root object type from the content folder of a script path.

        Paths may be absolute, relative or Windows-style; the longest matching
        `common/<folder>` suffix wins. Unknown folders keep the character root.
        """
        normalized = PurePosixPath(path.replace("\\", "/")).as_posix().lower()
        best: tuple[int, ObjectType] | None = None
        for folder, object_type in ROOT_OBJECT_TYPE_BY_FOLDER.items():
            if f"/{folder}/" in f"/{normalized}" and (best is None or len(folder) > best[0]):
                best = (len(folder), object_type)
        if best is None:
            return ResolveOptions()
        return ResolveOptions(initial_object_type=best[1])
