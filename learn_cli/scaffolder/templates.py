"""Jinja2 template rendering for the generated project files.

Provides the ``TemplateRenderer`` which loads the ``.j2`` assets shipped in
``learn_cli/scaffolder/templates/`` and the ``write_templates`` helper that
places each of them in a new project.  The assets carry no placeholders:
rendering returns them verbatim, the webpack config resolves its own paths
when webpack loads it.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from learn_cli.errors import TemplateWriteError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Template name -> output path relative to the project root, in write order.
PROJECT_TEMPLATES: dict[str, str] = {
    "babelrc.j2": ".babelrc",
    "webpack.config.js.j2": "webpack.config.js",
    "development.js.j2": "development.js",
    "index.html.j2": "src/index.html",
    "index.jsx.j2": "src/index.jsx",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffold's Jinja2 templates.

    Undefined variables raise instead of rendering as empty strings, so an
    asset that accidentally grows a placeholder fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"index.html.j2"``).
            context: Variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any] | None = None,
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(p.name for p in self.template_dir.glob("*.j2"))


async def write_templates(
    root: str | Path, renderer: TemplateRenderer | None = None
) -> list[Path]:
    """Write every entry of ``PROJECT_TEMPLATES`` under *root*.

    Writes run in order; the first failure raises ``TemplateWriteError`` and
    files already written are kept.

    Returns:
        The written file paths.
    """
    renderer = renderer or TemplateRenderer()
    project_root = Path(root)
    written: list[Path] = []
    for template_name, relative_path in PROJECT_TEMPLATES.items():
        target = project_root / relative_path
        try:
            written.append(await renderer.render_to_file(template_name, target))
        except OSError as exc:
            raise TemplateWriteError(target, exc) from exc
    return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
