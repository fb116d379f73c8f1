import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import emails  # type: ignore[import-untyped]

from cinelog.core.config import settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    pass


@dataclass
class EmailData:
    html_content: str
    subject: str


def now_utc_naive() -> datetime:
    """Current UTC time without tzinfo, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def send_email(
    *,
    email_to: str,
    subject: str = "",
    html_content: str = "",
) -> None:
    assert settings.emails_enabled, "no provided configuration for email variables"
    message = emails.Message(
        subject=subject,
        html=html_content,
        mail_from=(settings.EMAILS_FROM_NAME, settings.EMAILS_FROM_EMAIL),
    )
    smtp_options: dict[str, object] = {
        "host": settings.SMTP_HOST,
        "port": settings.SMTP_PORT,
    }
    if settings.SMTP_TLS:
        smtp_options["tls"] = True
    elif settings.SMTP_SSL:
        smtp_options["ssl"] = True
    if settings.SMTP_USER:
        smtp_options["user"] = settings.SMTP_USER
    if settings.SMTP_PASSWORD:
        smtp_options["password"] = settings.SMTP_PASSWORD
    response = message.send(to=email_to, smtp=smtp_options)
    logger.info("send email result: %s", response)
    if response is None or response.status_code != 250:
        raise EmailDeliveryError(
            f"SMTP server rejected the message to {email_to}"
        )


def generate_login_email(*, email_to: str, link: str) -> EmailData:
    project_name = settings.PROJECT_NAME
    subject = f"{project_name} - Sign in"
    html_content = f"""
    <div style="font-family: sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
      <h1>{project_name}</h1>
      <p>Click the button below to sign in as {email_to}.</p>
      <p><a href="{link}">Sign in</a></p>
      <p>This link is valid for {settings.EMAIL_TOKEN_EXPIRE_HOURS} hours.
      If you did not request it, you can ignore this email.</p>
      <p>Or paste this URL into your browser:<br>{link}</p>
    </div>
    """
    return EmailData(html_content=html_content, subject=subject)
