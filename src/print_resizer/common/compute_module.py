"""ComputeModule - Abstract base class for compute tasks."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from loguru import logger
from pydantic import BaseModel

from .errors import OutOfMemory, ProcessingFailed, ResizeError

P = TypeVar("P", bound=BaseModel)
Q = TypeVar("Q", bound=BaseModel)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - Params are validated before they reach execute()
    - execute() owns setup/teardown and error typing
    - run() holds the actual work
    """

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    def setup(self) -> None:
        """Optional per-execution setup."""
        pass

    def teardown(self) -> None:
        """Optional per-execution cleanup, runs on success and failure."""
        pass

    @abstractmethod
    def run(self, params: P) -> Q:
        """
        Execute task.

        - May raise ResizeError subclasses for classified failures
        - Anything else is converted by execute()
        """
        ...

    def execute(self, params: P) -> Q:
        self.setup()
        try:
            return self.run(params)

        except ResizeError:
            raise

        except MemoryError as exc:
            logger.error(f"{self.task_type} ran out of memory")
            raise OutOfMemory() from exc

        except Exception as exc:
            logger.exception(f"{self.task_type} failed")
            raise ProcessingFailed(str(exc) or type(exc).__name__) from exc

        finally:
            self.teardown()
