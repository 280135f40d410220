# AGPL-3.0 License

"""
Lint outcome data structures.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

Conclusion = Literal["success", "failure"]
AnnotationLevel = Literal["notice", "warning", "failure"]


@dataclass
class LintAnnotation:
    """
    A single finding attached to a line range of a file.
    """
    path: str
    start_line: int
    end_line: int
    message: str
    annotation_level: AnnotationLevel = "failure"
    title: Optional[str] = None
    start_column: Optional[int] = None
    end_column: Optional[int] = None

    def to_dict(self) -> dict:
        data = {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level,
            "message": self.message,
        }
        if self.title:
            data["title"] = self.title
        # Columns are only accepted for single-line annotations
        if self.start_line == self.end_line:
            if self.start_column is not None:
                data["start_column"] = self.start_column
            if self.end_column is not None:
                data["end_column"] = self.end_column
        return data


@dataclass
class LintOutput:
    """
    Structured report shown on the check run.

    Attributes:
        title: Short headline
        summary: Markdown summary of the lint run
        annotations: Findings to attach inline on the PR
    """
    title: str
    summary: str
    annotations: list[LintAnnotation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "summary": self.summary,
            "annotations": [a.to_dict() for a in self.annotations],
        }


@dataclass
class LintOutcome:
    """
    Structured result returned by a lint engine.

    An engine that cannot produce one raises EngineError instead.
    """
    conclusion: Conclusion
    output: Optional[LintOutput] = None

    @classmethod
    def success(cls, output: Optional[LintOutput] = None) -> "LintOutcome":
        return cls(conclusion="success", output=output)

    @classmethod
    def failure(cls, output: LintOutput) -> "LintOutcome":
        return cls(conclusion="failure", output=output)

    @property
    def passed(self) -> bool:
        return self.conclusion == "success"

    def __str__(self) -> str:
        status = "✓ PASSED" if self.passed else "✗ FAILED"
        title = self.output.title if self.output else "no output"
        return f"{status}: {title}"
