"""Template engine: decide which files a template plants.

Rendering is pure. It returns a Scaffold describing files and directories
relative to the project root, and the writer decides what actually lands on
disk. The only nondeterminism is the date stamped into generated text, which
comes from the caller.
"""

from dataclasses import dataclass, replace
from datetime import date
from pathlib import PurePosixPath

from sprout.cli.constants import JAVA_ASSIGNMENT, SWIFT_ASSIGNMENT, WEB_BASIC
from sprout.core import template_content as content


@dataclass(frozen=True)
class JavaAssignment:
    """Java homework skeleton: README, notes and a src/Main.java greeting."""


@dataclass(frozen=True)
class WebBasic:
    """Static site skeleton.

    Both flags may be set; bootstrap then wins when rendering.
    """

    tailwind: bool = False
    bootstrap: bool = False


@dataclass(frozen=True)
class SwiftAssignment:
    """Swift homework skeleton with a Sources/App/main.swift greeting."""


Template = JavaAssignment | WebBasic | SwiftAssignment


@dataclass(frozen=True)
class FileArtifact:
    """A file to plant, relative to the project root."""

    path: PurePosixPath
    content: str


@dataclass(frozen=True)
class Scaffold:
    """Everything a template wants under the project root.

    An empty Scaffold means "not scaffolded": the template was unknown and
    callers must stop before any git or remote step.

    label names the preset that produced it, e.g. 'web-basic (tailwind)'.
    """

    files: tuple[FileArtifact, ...] = ()
    directories: tuple[PurePosixPath, ...] = ()
    label: str = ""

    @property
    def scaffolded(self) -> bool:
        return bool(self.files or self.directories)


NOT_SCAFFOLDED = Scaffold()


def resolve_template(
    identifier: str, *, tailwind: bool = False, bootstrap: bool = False
) -> Template | None:
    """Map a template identifier to its variant.

    Args:
        identifier: One of the TEMPLATE_IDENTIFIERS (surrounding whitespace ignored)
        tailwind: Tailwind CDN option, only meaningful for web-basic
        bootstrap: Bootstrap CDN option, only meaningful for web-basic

    Returns:
        The Template, or None when the identifier is not recognized
    """
    identifier = identifier.strip()
    if identifier == JAVA_ASSIGNMENT:
        return JavaAssignment()
    if identifier == WEB_BASIC:
        return WebBasic(tailwind=tailwind, bootstrap=bootstrap)
    if identifier == SWIFT_ASSIGNMENT:
        return SwiftAssignment()
    return None


def template_label(template: Template) -> str:
    """Human-readable preset name, e.g. 'web-basic (tailwind)'."""
    if isinstance(template, JavaAssignment):
        return JAVA_ASSIGNMENT
    if isinstance(template, SwiftAssignment):
        return SWIFT_ASSIGNMENT
    if template.bootstrap:
        return f"{WEB_BASIC} (bootstrap)"
    if template.tailwind:
        return f"{WEB_BASIC} (tailwind)"
    return WEB_BASIC


def render(template: Template, name: str, today: date) -> Scaffold:
    """Produce the Scaffold for a template.

    Args:
        template: Template variant to render
        name: Project name, used in headings and greetings
        today: Date stamped into generated READMEs and pages
    """
    if isinstance(template, JavaAssignment):
        scaffold = _render_java(name, today)
    elif isinstance(template, SwiftAssignment):
        scaffold = _render_swift(name, today)
    else:
        scaffold = _render_web(template, name, today)
    return replace(scaffold, label=template_label(template))


def render_identifier(
    identifier: str,
    name: str,
    today: date,
    *,
    tailwind: bool = False,
    bootstrap: bool = False,
) -> Scaffold:
    """Resolve and render in one step; unknown identifiers give NOT_SCAFFOLDED."""
    template = resolve_template(identifier, tailwind=tailwind, bootstrap=bootstrap)
    if template is None:
        return NOT_SCAFFOLDED
    return render(template, name, today)


def render_gitprep_files(dir_name: str, today: date) -> Scaffold:
    """README and .gitignore that `gitprep` adds to an existing directory."""
    return Scaffold(
        files=(
            FileArtifact(PurePosixPath("README.md"), content.gitprep_readme(dir_name, today)),
            FileArtifact(PurePosixPath(".gitignore"), content.JAVA_GITIGNORE),
        )
    )


def _render_java(name: str, today: date) -> Scaffold:
    return Scaffold(
        files=(
            FileArtifact(PurePosixPath("README.md"), content.java_readme(name, today)),
            FileArtifact(PurePosixPath(".gitignore"), content.JAVA_GITIGNORE),
            FileArtifact(PurePosixPath("notes/requirements.md"), content.REQUIREMENTS_NOTES),
            FileArtifact(PurePosixPath("src/Main.java"), content.java_main(name)),
        ),
        directories=(PurePosixPath("src"), PurePosixPath("notes")),
    )


def _render_swift(name: str, today: date) -> Scaffold:
    return Scaffold(
        files=(
            FileArtifact(PurePosixPath("README.md"), content.swift_readme(name, today)),
            FileArtifact(PurePosixPath(".gitignore"), content.SWIFT_GITIGNORE),
            FileArtifact(PurePosixPath("Sources/App/main.swift"), content.swift_main(name)),
        ),
        directories=(PurePosixPath("Sources/App"),),
    )


def _render_web(template: WebBasic, name: str, today: date) -> Scaffold:
    if template.bootstrap:
        framework_head = content.BOOTSTRAP_HEAD
        main_class = "container py-4"
    elif template.tailwind:
        framework_head = content.TAILWIND_HEAD
        main_class = "p-6 max-w-xl mx-auto"
    else:
        framework_head = ""
        main_class = ""

    return Scaffold(
        files=(
            FileArtifact(
                PurePosixPath("index.html"),
                content.web_index(name, today, framework_head, main_class),
            ),
            FileArtifact(PurePosixPath("style.css"), content.STYLE_CSS),
            FileArtifact(PurePosixPath("app.js"), content.APP_JS),
            FileArtifact(PurePosixPath("README.md"), content.web_readme(name, today)),
            FileArtifact(PurePosixPath(".gitignore"), content.WEB_GITIGNORE),
        ),
        directories=(PurePosixPath("assets"),),
    )
