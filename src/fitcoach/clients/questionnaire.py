"""Interactive prompts for provisioning accounts from the terminal."""

from dataclasses import dataclass

import questionary
from questionary import Style

from ..models.account import Role

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


@dataclass
class NewAccountAnswers:
    """Answers collected for a new account."""

    first_name: str
    last_name: str
    email: str
    role: Role


def _required(value: str) -> bool | str:
    return bool(value.strip()) or "This field is required"


class AccountQuestionnaire:
    """Ask the coach for the details of the account to create."""

    async def collect_new_account(self) -> NewAccountAnswers | None:
        """Run the prompts. Returns ``None`` if the user aborts."""
        print("\n=== New Account ===\n")

        first_name = await questionary.text(
            "First name:", validate=_required, style=custom_style
        ).ask_async()
        if first_name is None:
            return None

        last_name = await questionary.text(
            "Last name:", validate=_required, style=custom_style
        ).ask_async()
        if last_name is None:
            return None

        email = await questionary.text(
            "Email:",
            validate=lambda v: "@" in v or "Enter a valid email address",
            style=custom_style,
        ).ask_async()
        if email is None:
            return None

        role = await questionary.select(
            "Role:",
            choices=[
                questionary.Choice("Client", Role.CLIENT),
                questionary.Choice("Coach", Role.COACH),
            ],
            style=custom_style,
        ).ask_async()
        if role is None:
            return None

        return NewAccountAnswers(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email.strip(),
            role=role,
        )
