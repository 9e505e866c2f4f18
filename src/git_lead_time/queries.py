"""GraphQL documents sent to the GitHub API."""

TEAM_MEMBERS_QUERY = """
query TeamMembers($org: String!, $team: String!) {
  organization(login: $org) {
    team(slug: $team) {
      members(first: 100) {
        nodes {
          login
        }
      }
    }
  }
}
"""

PULL_REQUESTS_QUERY = """
query PullRequests($repoOwner: String!, $repoName: String!, $cursor: String, $pageSize: Int!) {
  repository(owner: $repoOwner, name: $repoName) {
    pullRequests(first: $pageSize, states: MERGED, after: $cursor) {
      totalCount
      pageInfo {
        endCursor
        hasNextPage
      }
      nodes {
        commits(first: 250) {
          nodes {
            commit {
              authoredDate
              messageHeadline
            }
          }
        }
        mergeCommit {
          authoredDate
          messageHeadline
          checkSuites(first: 25) {
            nodes {
              status
              conclusion
              updatedAt
            }
          }
        }
        author {
          __typename
          ... on User {
            login
          }
        }
      }
    }
  }
}
"""

PULL_REQUEST_COUNT_QUERY = """
query PullRequestCount($repoOwner: String!, $repoName: String!) {
  repository(owner: $repoOwner, name: $repoName) {
    pullRequests(first: 1, states: MERGED) {
      totalCount
    }
  }
}
"""
