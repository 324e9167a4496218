"""Allow ``python -m memento.cli``."""
from memento.cli import cli

cli(obj={})
