"""AgentSession — session resource schema, repo validation, and status model.

Defines the desired-state configuration of an agentic session (the git
repositories it clones and pushes), the codec that stores that
configuration in the persisted resource spec, and the status records a
reconciler writes back.
"""

__version__ = "0.1.0"
