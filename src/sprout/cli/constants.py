"""Constants shared by the sprout CLI commands."""

# Template identifiers accepted by `sprout new --template`
JAVA_ASSIGNMENT = "java-assignment"
WEB_BASIC = "web-basic"
SWIFT_ASSIGNMENT = "swift-assignment"
TEMPLATE_IDENTIFIERS = (JAVA_ASSIGNMENT, WEB_BASIC, SWIFT_ASSIGNMENT)

DEFAULT_BRANCH = "main"
ORIGIN = "origin"
INITIAL_COMMIT_MESSAGE = "chore: initialize project with sprout"

HELP_FLAGS = ("--help", "-h")

GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
