"""Canned Jira response bodies shared by the test modules."""

BASE_URL = "https://jira.example.com"
API = "/rest/api/latest"

HOSTED_USER = {
    "self": f"{BASE_URL}{API}/user?username=jdoe",
    "key": "JIRAUSER10100",
    "name": "jdoe",
    "emailAddress": "jdoe@example.com",
    "displayName": "Jane Doe",
    "active": True,
    "timeZone": "Europe/Berlin",
}

CLOUD_USER = {
    "self": f"{BASE_URL}{API}/user?accountId=5b10ac8d82e05b22cc7d4ef5",
    "accountId": "5b10ac8d82e05b22cc7d4ef5",
    "accountType": "atlassian",
    "emailAddress": "jdoe@example.com",
    "displayName": "Jane Doe",
    "active": True,
}

ISSUE_PAYLOAD = {
    "expand": "renderedFields,names",
    "id": "10001",
    "self": f"{BASE_URL}{API}/issue/10001",
    "key": "PROJ-1",
    "fields": {
        "summary": "Login page returns 500",
        "assignee": HOSTED_USER,
        "labels": ["backend"],
        "timespent": 3600,
        "status": {
            "id": "3",
            "name": "In Progress",
            "statusCategory": {"id": 4, "key": "indeterminate", "name": "In Progress"},
        },
        "customfield_10020": [{"id": 7, "name": "Sprint 7"}],
        "customfield_10016": 5.0,
    },
    "changelog": {"startAt": 0, "total": 0, "histories": []},
}
