"""File intentions and the intention collection handed through the pipeline."""

from __future__ import annotations

from pathlib import PurePosixPath

from .base import Intention
from .members import GlobalFunctionGenerationIntention
from .types import (
    ClassExtensionGenerationIntention,
    ClassGenerationIntention,
    ProtocolGenerationIntention,
    StructGenerationIntention,
    TypeGenerationIntention,
    detach,
    remove_identical,
)


class FileGenerationIntention(Intention):
    """An intention to generate one Swift file from one Objective-C file."""

    def __init__(self, source_path: str, target_path: str | None = None) -> None:
        super().__init__()
        self.source_path: str = source_path
        self.target_path: str = (
            target_path
            if target_path is not None
            else str(PurePosixPath(source_path).with_suffix(".swift"))
        )
        self._type_intentions: list[TypeGenerationIntention] = []
        self._global_function_intentions: list[GlobalFunctionGenerationIntention] = []
        # Raw `#import`/`#include`/`@import` lines collected by the front-end
        self.preprocessor_directives: list[str] = []
        # Swift module names, filled by the import directive pass
        self.import_directives: list[str] = []

    def __repr__(self) -> str:
        return "FileGenerationIntention(" + self.source_path + ")"

    @property
    def stem(self) -> str:
        return str(PurePosixPath(self.source_path).with_suffix(""))

    @property
    def is_header(self) -> bool:
        return self.source_path.endswith(".h")

    @property
    def is_implementation(self) -> bool:
        return self.source_path.endswith(".m")

    @property
    def is_empty(self) -> bool:
        return len(self._type_intentions) == 0 and len(self._global_function_intentions) == 0

    # ── contents ─────────────────────────────────────────────

    @property
    def type_intentions(self) -> list[TypeGenerationIntention]:
        return list(self._type_intentions)

    @property
    def class_intentions(self) -> list[ClassGenerationIntention]:
        return [t for t in self._type_intentions if isinstance(t, ClassGenerationIntention)]

    @property
    def extension_intentions(self) -> list[ClassExtensionGenerationIntention]:
        return [
            t for t in self._type_intentions if isinstance(t, ClassExtensionGenerationIntention)
        ]

    @property
    def protocol_intentions(self) -> list[ProtocolGenerationIntention]:
        return [t for t in self._type_intentions if isinstance(t, ProtocolGenerationIntention)]

    @property
    def struct_intentions(self) -> list[StructGenerationIntention]:
        return [t for t in self._type_intentions if isinstance(t, StructGenerationIntention)]

    @property
    def global_function_intentions(self) -> list[GlobalFunctionGenerationIntention]:
        return list(self._global_function_intentions)

    def add_type(self, intention: TypeGenerationIntention) -> None:
        detach(intention)
        self._type_intentions.append(intention)
        intention.parent = self

    def remove_type(self, intention: TypeGenerationIntention) -> None:
        if remove_identical(self._type_intentions, intention):
            intention.parent = None

    def add_global_function(self, intention: GlobalFunctionGenerationIntention) -> None:
        detach(intention)
        self._global_function_intentions.append(intention)
        intention.parent = self

    def remove_global_function(self, intention: GlobalFunctionGenerationIntention) -> None:
        if remove_identical(self._global_function_intentions, intention):
            intention.parent = None

    def remove_member(self, intention: Intention) -> None:
        if isinstance(intention, TypeGenerationIntention):
            self.remove_type(intention)
        elif isinstance(intention, GlobalFunctionGenerationIntention):
            self.remove_global_function(intention)


class IntentionCollection:
    """All file intentions of one conversion run."""

    def __init__(self) -> None:
        self._intentions: list[FileGenerationIntention] = []

    def file_intentions(self) -> list[FileGenerationIntention]:
        return list(self._intentions)

    def add_intention(self, intention: FileGenerationIntention) -> None:
        if any(f is intention for f in self._intentions):
            return
        self._intentions.append(intention)

    def remove_intention(self, intention: FileGenerationIntention) -> None:
        remove_identical(self._intentions, intention)

    def file_named(self, source_path: str) -> FileGenerationIntention | None:
        for f in self._intentions:
            if f.source_path == source_path:
                return f
        return None

    def type_intentions(self) -> list[TypeGenerationIntention]:
        return [t for f in self._intentions for t in f.type_intentions]

    def class_intentions(self) -> list[ClassGenerationIntention]:
        return [c for f in self._intentions for c in f.class_intentions]

    def extension_intentions(self) -> list[ClassExtensionGenerationIntention]:
        return [e for f in self._intentions for e in f.extension_intentions]

    def protocol_intentions(self) -> list[ProtocolGenerationIntention]:
        return [p for f in self._intentions for p in f.protocol_intentions]

    def global_function_intentions(self) -> list[GlobalFunctionGenerationIntention]:
        return [g for f in self._intentions for g in f.global_function_intentions]
