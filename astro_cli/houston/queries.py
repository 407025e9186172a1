"""GraphQL documents sent to Houston."""

DEPLOYMENT_USER_ADD_REQUEST = """
mutation AddDeploymentUser(
  $userId: Id
  $email: String!
  $deploymentId: Id!
  $role: Role!
) {
  deploymentAddUserRole(
    userId: $userId
    email: $email
    deploymentId: $deploymentId
    role: $role
  ) {
    id
    user {
      username
    }
    role
    deployment {
      id
      releaseName
    }
  }
}
"""

DEPLOYMENT_USER_DELETE_REQUEST = """
mutation RemoveDeploymentUser(
  $userId: Id
  $email: String!
  $deploymentId: Id!
) {
  deploymentRemoveUserRole(
    userId: $userId
    email: $email
    deploymentId: $deploymentId
  ) {
    id
    user {
      username
    }
    role
    deployment {
      id
      releaseName
    }
  }
}
"""

DEPLOYMENT_USER_UPDATE_REQUEST = """
mutation UpdateDeploymentUser(
  $userId: Id
  $email: String!
  $deploymentId: Id!
  $role: Role!
) {
  deploymentUpdateUserRole(
    userId: $userId
    email: $email
    deploymentId: $deploymentId
    role: $role
  ) {
    id
    user {
      username
    }
    role
    deployment {
      id
      releaseName
    }
  }
}
"""
