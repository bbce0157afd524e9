import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import labyrinth_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from labyrinth_toolkit.core.models import QuestionRecord


def make_records(count: int) -> list[QuestionRecord]:
    """Create numbered question records."""
    return [
        QuestionRecord(
            question=f"Question {i}?",
            correct_answer=f"right {i}",
            distractors=(f"wrong {i}a", f"wrong {i}b"),
        )
        for i in range(count)
    ]


# Common test fixtures
@pytest.fixture
def records_factory():
    """Return the make_records helper."""
    return make_records


@pytest.fixture
def ten_records() -> list[QuestionRecord]:
    return make_records(10)


@pytest.fixture
def question_file(tmp_path: Path):
    """Write a question file with the given number of questions."""
    def _write(count: int, name: str = "questions.txt") -> Path:
        blocks = []
        for i in range(count):
            blocks.append(f"Question {i}?\nright {i}\nwrong {i}a\nwrong {i}b\n")
        path = tmp_path / name
        path.write_text("\n".join(blocks), encoding="utf-8")
        return path
    return _write
