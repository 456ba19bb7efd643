"""
Base use case classes.

A use case receives an input DTO and returns a ``UseCaseResult`` wrapping the
output DTO. Expected "not found / no-op" outcomes are reported through
``UseCaseResult.fail`` so the interface layer decides how to surface them.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Outcome of a use case run."""
    success: bool
    data: Optional[OutputDTO] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, data: OutputDTO) -> 'UseCaseResult[OutputDTO]':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: str = None, data: OutputDTO = None) -> 'UseCaseResult[OutputDTO]':
        """Failed result; ``data`` may still carry the unchanged state."""
        return cls(success=False, data=data, error=error, error_code=error_code)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        pass
