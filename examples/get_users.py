"""Displays users matching a search string, limited to the first 10 records.

Usage:
    python examples/get_users.py "search string"
"""

import sys

from dfa_services.errors import DfaError
from dfa_services.services import DfaService
from dfa_services.user import DfaUser

DESCRIPTION = (
    "This code example displays user name, Id, network Id, subnetwork Id, and user "
    "group Id for the given search criteria. Results are limited to the first 10 records."
)

PAGE_SIZE = 10


def run(user: DfaUser, search_string: str) -> None:
    service = user.get_service(DfaService.v1_11.UserRemoteService)

    search_criteria = {
        "pageSize": PAGE_SIZE,
        "searchString": search_string,
    }

    try:
        users = service.service.getUsersByCriteria(search_criteria)

        records = getattr(users, "records", None)
        if not records:
            print("No users found for your search criteria.")
            return

        for record in records:
            print(
                f'User with name "{record.name}", Id "{record.id}", network Id '
                f'"{record.networkId}", subnetwork Id "{record.subnetworkId}", and user '
                f'group Id "{record.userGroupId}" was found.'
            )
    except DfaError as e:
        print(f'Failed to retrieve users. Exception says "{e}"')


def main():
    print(DESCRIPTION)
    search_string = sys.argv[1] if len(sys.argv) > 1 else ""
    try:
        run(DfaUser(), search_string)
    except DfaError as e:
        print(f'Failed to create the service. Exception says "{e}"')


if __name__ == "__main__":
    main()
