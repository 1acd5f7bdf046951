"""Infrastructure layer — adapters around third-party prompt engines.

Rules
-----
* May import from ``core`` (protocols and models) and ``exceptions``.
* Third-party packages are imported lazily and their failures mapped
  to :class:`~askwrap.exceptions.AskwrapError` subclasses.
"""

from askwrap.infra.questionary_adapter import QuestionaryPromptAdapter

__all__: list[str] = ["QuestionaryPromptAdapter"]
