# src/telosys_shell/model.py (Shell Layer)
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class Entity(BaseModel):
    """A single entity of a loaded model, identified by its class name."""
    class_name: str
    table_name: Optional[str] = None


class Model(BaseModel):
    name: str
    entities: List[Entity] = Field(default_factory=list)

    def get_entity_by_class_name(self, class_name: str) -> Optional[Entity]:
        """Returns the entity with the given class name or None if unknown."""
        for entity in self.entities:
            if entity.class_name == class_name:
                return entity
        return None


class TargetDefinition(BaseModel):
    """
    Maps one template of a bundle to one generated file.
    The 'id' is the identity used for deduplication.
    """
    id: str
    name: str = ""
    template: str
    file: str
    folder: str = ""
    is_once: bool = False
    is_resource: bool = False


class TargetsDefinitions(BaseModel):
    templates_targets: List[TargetDefinition] = Field(default_factory=list)
    resources_targets: List[TargetDefinition] = Field(default_factory=list)


class CauseEntry(BaseModel):
    """One link of an exception chain: the exception type name and its message."""
    kind: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CauseEntry":
        return cls(kind=type(exc).__name__, message=str(exc))


class ErrorReport(BaseModel):
    """
    An error reported by the generation engine for a single target.

    'exception' is the top-level exception (if any), 'causes' its chain of
    nested causes ordered outermost first, innermost last.
    """
    error_type: str
    message: str
    exception: Optional[CauseEntry] = None
    causes: List[CauseEntry] = Field(default_factory=list)

    @classmethod
    def from_exception(cls, error_type: str, message: str, exc: Optional[BaseException]) -> "ErrorReport":
        """Builds a report and captures the exception chain at this point."""
        if exc is None:
            return cls(error_type=error_type, message=message)

        causes: List[CauseEntry] = []
        seen = {id(exc)}
        cause = exc.__cause__ or exc.__context__
        while cause is not None and id(cause) not in seen:
            seen.add(id(cause))
            causes.append(CauseEntry.from_exception(cause))
            cause = cause.__cause__ or cause.__context__

        return cls(
            error_type=error_type,
            message=message,
            exception=CauseEntry.from_exception(exc),
            causes=causes,
        )


class GenerationResult(BaseModel):
    """
    Outcome of one generation run.
    The engine may give its own error count, otherwise the reported errors are counted.
    """
    number_of_files_generated: int = 0
    number_of_resources_copied: int = 0
    number_of_generation_errors: Optional[int] = None
    errors: List[ErrorReport] = Field(default_factory=list)

    @model_validator(mode="after")
    def _count_errors_when_not_given(self) -> "GenerationResult":
        if self.number_of_generation_errors is None:
            self.number_of_generation_errors = len(self.errors)
        return self
