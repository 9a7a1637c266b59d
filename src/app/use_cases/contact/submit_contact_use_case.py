from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content.commands import ContactCommand
from src.domain.entities import ContactSubmission
from src.domain.result import Result, Return


class SubmitContactUseCase:
    """
    Stores a message from the public contact form.

    Anonymous, so no audit entry is written. The sender's IP is kept on the
    submission itself.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: ContactCommand, ip_address: Optional[str] = None
    ) -> Result[ContactSubmission]:
        async with self.uow:
            submission = ContactSubmission(
                name=command.name,
                email=str(command.email).lower(),
                subject=command.subject,
                message=command.message,
                ip_address=ip_address,
            )
            submission = await self.uow.contacts.create(submission)
            await self.uow.commit()
        return Return.ok(submission)
