"""Email templates read from a directory of HTML files."""

from pathlib import Path

from userdesk.domain.exceptions import ValidationError

TEMPLATE_PATTERN = "*.html"


class FileTemplateStore:
    """Loads ``<directory>/<template_id>.html`` as a list of lines."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def path_for(self, template_id: str) -> Path:
        return self._directory / TEMPLATE_PATTERN.replace("*", template_id)

    def load(self, template_id: str) -> list[str]:
        """Read template lines. Missing or out-of-directory templates are invalid."""
        path = self.path_for(template_id)
        try:
            if path.resolve().parent != self._directory.resolve():
                raise FileNotFoundError(path)
            return path.read_text(encoding="utf-8").splitlines()
        except (OSError, ValueError):
            # ValueError: embedded null byte in the id
            raise ValidationError(f"Could not find email template '{path.name}'.") from None
