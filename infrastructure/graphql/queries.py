"""GraphQL documents sent to the CRM API."""

LOGIN_MUTATION = """
    mutation Login($email: String!) {
        login(loginInput: {
            email: $email
        }) {
            accessToken
        }
    }
"""

# Lightweight query used by the auth check.
ME_CHECK_QUERY = """
    query Me {
        me {
            name
        }
    }
"""

ME_IDENTITY_QUERY = """
    query Me {
        me {
            id,
            name,
            email,
            phone,
            jobTitle,
            timezone,
            avatarUrl
        }
    }
"""
