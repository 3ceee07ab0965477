class JiraClientError(Exception):
    """Base exception for all Jira client errors."""

    def __init__(self, message: str = "A Jira client error occurred"):
        self.message = message
        super().__init__(self.message)
