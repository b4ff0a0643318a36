"""Constants used across the hubclient package."""

# GitHub API constants
GITHUB_API_BASE = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"
USER_AGENT = "hubclient"
REQUEST_TIMEOUT = 30  # seconds

# Environment variables consulted when no explicit value is given
TOKEN_ENV_VAR = "GITHUB_TOKEN"
API_URL_ENV_VAR = "GITHUB_API_URL"

# Endpoint path templates, expanded by hubclient.api.url_template.build_path
CURRENT_USER_PATH = "/user"
CURRENT_USER_REPOS_PATH = "/user/repos"
USER_PATH = "/users/{user}"
USER_REPOS_PATH = "/users/{user}/repos"
ORG_PATH = "/orgs/{org}"
ORG_REPOS_PATH = "/orgs/{org}/repos"
SEARCH_REPOS_PATH = "/search/repositories"

REPO_PATH = "/repos/{owner}/{repo}"
REPO_FORKS_PATH = "/repos/{owner}/{repo}/forks"
REPO_BRANCHES_PATH = "/repos/{owner}/{repo}/branches"
REPO_PULLS_PATH = "/repos/{owner}/{repo}/pulls"
REPO_PULL_PATH = "/repos/{owner}/{repo}/pulls/{pull}"
REPO_REF_PATH = "/repos/{owner}/{repo}/git/refs/{ref}"
REPO_ISSUES_PATH = "/repos/{owner}/{repo}/issues"
REPO_ISSUE_PATH = "/repos/{owner}/{repo}/issues/{number}"
REPO_ISSUE_COMMENTS_PATH = "/repos/{owner}/{repo}/issues/{number}/comments"
