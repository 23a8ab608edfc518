"""Email templates."""

from dataclasses import dataclass
from html import escape


@dataclass(frozen=True)
class EmailMessageContent:
    """Rendered email ready to send."""

    subject: str
    html: str
    text: str


def build_reminder_email(
    user_name: str,
    plant_name: str,
    title: str,
    description: str | None,
) -> EmailMessageContent:
    """Render the plant care reminder email.

    :param user_name: Recipient display name.
    :param plant_name: Name of the plant the reminder is for.
    :param title: Reminder title.
    :param description: Optional reminder description.
    :returns: Subject, HTML and plain text bodies.
    """
    description = description or ""
    html = f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #2e7d32;">🌱 Plant Care Reminder</h2>
  <p>Hello {escape(user_name)},</p>
  <p>It's time to take care of your plant <strong>{escape(plant_name)}</strong>!</p>
  <div style="background-color: #f5f5f5; padding: 20px; border-radius: 8px; margin: 20px 0;">
    <h3 style="color: #2e7d32; margin-top: 0;">{escape(title)}</h3>
    <p>{escape(description)}</p>
  </div>
  <p>Keep your plants healthy and happy! 🌿</p>
  <p>Best regards,<br>Your AI Plant Care Assistant</p>
</div>
"""
    text = (
        f"Hello {user_name},\n\n"
        f"It's time to take care of your plant {plant_name}!\n\n"
        f"{title}\n"
        f"{description}\n\n"
        "Keep your plants healthy and happy!\n\n"
        "Best regards,\n"
        "Your AI Plant Care Assistant\n"
    )
    return EmailMessageContent(
        subject=f"🌱 Plant Care Reminder: {title}",
        html=html,
        text=text,
    )
