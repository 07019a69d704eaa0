"""Literal text of the files each template plants."""

from datetime import date

JAVA_GITIGNORE = """# Java
*.class
*.jar
*.log
.idea/
.vscode/
out/
target/
bin/
"""

SWIFT_GITIGNORE = """.build/
Packages/
xcuserdata/
DerivedData/
.DS_Store
"""

WEB_GITIGNORE = """.DS_Store
node_modules/
dist/
.idea/
.vscode/
"""

REQUIREMENTS_NOTES = """## Requirements

- [ ] Goals
- [ ] Input/Output
- [ ] Edge cases
"""

TAILWIND_HEAD = """<!-- Tailwind via CDN for quick demos -->
  <script src="https://cdn.tailwindcss.com"></script>"""

BOOTSTRAP_HEAD = """<!-- Bootstrap via CDN -->
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <script src="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/js/bootstrap.bundle.min.js" defer></script>"""

STYLE_CSS = """:root {
  --ink: #1f2937;
  --bg: #f8fafc;
  --accent: #22c55e;
}
html, body { margin: 0; padding: 0; background: var(--bg); color: var(--ink); font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; }
main { padding: 2rem; }
h1 { margin-bottom: 0.5rem; }
"""

APP_JS = """console.log("sprout web scaffold ready");
"""


def java_readme(name: str, today: date) -> str:
    return (
        f"# {name}\n\n"
        f"Created on {today.isoformat()} with sprout.\n\n"
        "## How to run\n"
        "```bash\n"
        "javac src/Main.java && java -cp src Main\n"
        "```\n"
    )


def java_main(name: str) -> str:
    return (
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        f'        System.out.println("Hello, {name}! Let\'s code.");\n'
        "    }\n"
        "}\n"
    )


def swift_readme(name: str, today: date) -> str:
    return f"# {name} (Swift Assignment)\n\nCreated on {today.isoformat()} with sprout.\n"


def swift_main(name: str) -> str:
    return f'import Foundation\n\nprint("Hello, {name}! Time to Swift.")\n'


def web_index(name: str, today: date, framework_head: str, main_class: str) -> str:
    head_extra = f"  {framework_head}\n" if framework_head else ""
    class_attr = f' class="{main_class}"' if main_class else ""
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"  <title>{name}</title>\n"
        f"{head_extra}"
        '  <link rel="stylesheet" href="style.css">\n'
        "</head>\n"
        "<body>\n"
        f"  <main{class_attr}>\n"
        f"    <h1>{name}</h1>\n"
        f"    <p>Planted by sprout web on {today.isoformat()}.</p>\n"
        "  </main>\n"
        '  <script src="app.js" defer></script>\n'
        "</body>\n"
        "</html>\n"
    )


def web_readme(name: str, today: date) -> str:
    return (
        f"# {name} (Web)\n"
        f"Generated by sprout on {today.isoformat()}.\n\n"
        "## Files\n"
        "- index.html\n"
        "- style.css\n"
        "- app.js\n"
        "- assets/\n\n"
        "## Quick Preview\n"
        "Use a simple server, e.g. Python 3:\n"
        "```bash\n"
        "python3 -m http.server\n"
        "```\n"
    )


def gitprep_readme(dir_name: str, today: date) -> str:
    return f"# {dir_name}\n\nInitialized by sprout gitprep on {today.isoformat()}\n"
