"""Displays spotlight activity type names and IDs.

Reads credentials from DFA_USER_NAME, DFA_PASSWORD and DFA_APPLICATION_NAME.
"""

from dfa_services.errors import DfaError
from dfa_services.services import DfaService
from dfa_services.user import DfaUser

DESCRIPTION = "This code example displays activity type names and Ids."


def run(user: DfaUser) -> None:
    service = user.get_service(DfaService.v1_12.SpotlightRemoteService)

    try:
        activity_types = service.service.getSpotlightActivityTypes() or []

        for result in activity_types:
            print(f'Activity type with name "{result.name}" and Id "{result.id}" was found.')
    except DfaError as e:
        print(f'Failed to retrieve activity types. Exception says "{e}"')


def main():
    print(DESCRIPTION)
    try:
        run(DfaUser())
    except DfaError as e:
        print(f'Failed to create the service. Exception says "{e}"')


if __name__ == "__main__":
    main()
