"""Plain-text rendering of a repository list."""
from typing import Iterable, List
from src.domain.models import Repository


TITLE = "GitHub Repos"
NO_LANGUAGE = "—"


def format_repository_row(repository: Repository) -> str:
    """Render one repository as ``name  Stars: N  language``."""
    language = repository.language if repository.has_language else NO_LANGUAGE
    return f"{repository.name}  Stars: {repository.star_count}  {language}"


def render_repository_list(repositories: Iterable[Repository]) -> str:
    lines: List[str] = [TITLE, "=" * len(TITLE)]
    rows = [format_repository_row(repo) for repo in repositories]
    lines.extend(rows or ["(no repositories)"])
    return "\n".join(lines)
