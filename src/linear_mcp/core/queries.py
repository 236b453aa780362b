"""
GraphQL documents sent to Linear.

Kept together so the selected fields are easy to audit.
"""

VIEWER_QUERY = """
query Viewer {
  viewer {
    id
    name
    email
  }
}
"""

TEAMS_QUERY = """
query Teams {
  teams {
    nodes {
      id
      name
      key
      description
      states {
        nodes { id name type color position }
      }
      labels {
        nodes { id name color }
      }
    }
    pageInfo { hasNextPage endCursor }
  }
}
"""

_ISSUE_FIELDS = """
      id
      identifier
      title
      description
      priority
      priorityLabel
      estimate
      url
      createdAt
      updatedAt
      state { id name type }
      assignee { id name email }
      team { id name key }
      project { id name }
      cycle { id name number }
      labels { nodes { id name } }
"""

SEARCH_ISSUES_QUERY = (
    """
query SearchIssues($filter: IssueFilter, $first: Int) {
  issues(filter: $filter, first: $first) {
    nodes {"""
    + _ISSUE_FIELDS
    + """    }
    pageInfo { hasNextPage endCursor }
  }
}
"""
)

TEAM_CYCLES_QUERY = """
query TeamCycles($teamId: String!) {
  team(id: $teamId) {
    id
    cycles {
      nodes {
        id
        name
        number
        startsAt
        endsAt
        completedAt
        progress
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

_PROJECT_FIELDS = """
      id
      name
      description
      state
      progress
      startDate
      targetDate
      url
      createdAt
      updatedAt
      lead { id name email }
"""

PROJECTS_QUERY = (
    """
query Projects($first: Int) {
  projects(first: $first) {
    nodes {"""
    + _PROJECT_FIELDS
    + """    }
    pageInfo { hasNextPage endCursor }
  }
}
"""
)

TEAM_PROJECTS_QUERY = (
    """
query TeamProjects($teamId: String!, $first: Int) {
  team(id: $teamId) {
    id
    projects(first: $first) {
      nodes {"""
    + _PROJECT_FIELDS
    + """      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""
)

CREATE_ISSUE_MUTATION = (
    """
mutation CreateIssue($input: IssueCreateInput!) {
  issueCreate(input: $input) {
    success
    lastSyncId
    issue {"""
    + _ISSUE_FIELDS
    + """    }
  }
}
"""
)

UPDATE_ISSUE_MUTATION = (
    """
mutation UpdateIssue($id: String!, $input: IssueUpdateInput!) {
  issueUpdate(id: $id, input: $input) {
    success
    lastSyncId
    issue {"""
    + _ISSUE_FIELDS
    + """    }
  }
}
"""
)
