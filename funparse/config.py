from dataclasses import dataclass


@dataclass(frozen=True)
class EvaluatorConfig:
    """Options for `funparse.evaluator`.

    Immutable and explicit; nothing is read from the environment.
    """

    require_full_input: bool = True
    strip_whitespace: bool = True  # surrounding whitespace only
    max_nesting: int = 30  # deepest allowed parenthesis nesting

    def __post_init__(self):
        if self.max_nesting < 1:
            raise ValueError(f"max_nesting must be at least 1, got {self.max_nesting}")
