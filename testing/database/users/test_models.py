"""Tests for the User model notification preference helpers."""

import unittest
from uuid import uuid4

from plantcare.database.users.models import User
from plantcare.enums import NotificationType


def _user(**settings: bool) -> User:
    return User(id=uuid4(), name="Ada", email="ada@example.com", password_hash="x", **settings)


class TestAllowsNotification(unittest.TestCase):
    """Tests for User.allows_notification."""

    def test_unset_preferences_allow_everything(self) -> None:
        """Test that a fresh user with no flags set accepts all types."""
        user = _user()

        for notification_type in NotificationType:
            self.assertTrue(user.allows_notification(notification_type))

    def test_master_switch_blocks_every_type(self) -> None:
        """Test that notifications_enabled=False blocks all types, including system."""
        user = _user(notifications_enabled=False)

        for notification_type in NotificationType:
            self.assertFalse(user.allows_notification(notification_type))

    def test_type_switch_blocks_only_that_type(self) -> None:
        """Test that a per-type switch only affects its own type."""
        user = _user(notify_weather_alerts=False)

        self.assertFalse(user.allows_notification(NotificationType.WEATHER_ALERT))
        self.assertTrue(user.allows_notification(NotificationType.REMINDER))
        self.assertTrue(user.allows_notification(NotificationType.AI_INSIGHT))

    def test_system_notifications_have_no_opt_out(self) -> None:
        """Test that system notifications ignore per-type switches."""
        user = _user(
            notify_reminders=False,
            notify_plant_care=False,
            notify_weather_alerts=False,
            notify_ai_insights=False,
        )

        self.assertTrue(user.allows_notification(NotificationType.SYSTEM))

    def test_accepts_string_type(self) -> None:
        """Test that the raw string value is accepted."""
        user = _user(notify_plant_care=False)

        self.assertFalse(user.allows_notification("plant_care"))

    def test_unknown_type_raises(self) -> None:
        """Test that an unknown type raises ValueError."""
        with self.assertRaises(ValueError):
            _user().allows_notification("newsletter")


class TestWantsReminderEmails(unittest.TestCase):
    """Tests for User.wants_reminder_emails."""

    def test_defaults_to_true(self) -> None:
        """Test that reminder emails are wanted by default."""
        self.assertTrue(_user().wants_reminder_emails)

    def test_false_when_email_disabled(self) -> None:
        """Test that disabling email turns reminder emails off."""
        self.assertFalse(_user(notify_email=False).wants_reminder_emails)

    def test_false_when_reminders_disabled(self) -> None:
        """Test that disabling reminders turns reminder emails off."""
        self.assertFalse(_user(notify_reminders=False).wants_reminder_emails)

    def test_false_when_notifications_disabled(self) -> None:
        """Test that the master switch turns reminder emails off."""
        self.assertFalse(_user(notifications_enabled=False).wants_reminder_emails)

    def test_push_setting_is_irrelevant(self) -> None:
        """Test that the push setting does not affect email."""
        self.assertTrue(_user(notify_push=False).wants_reminder_emails)


if __name__ == "__main__":
    unittest.main()
