"""Template method: a fixed OTP workflow with channel-specific steps."""

from __future__ import annotations

from abc import ABC, abstractmethod

_DEMO_OTP = "1234"


def _issue_otp(channel: str) -> str:
    """Announce and return the demonstration password for a channel."""
    print(f"{channel}: generating random otp {_DEMO_OTP}")
    return _DEMO_OTP


class Otp(ABC):
    """Generates, caches and sends a one-time password in a fixed order."""

    def gen_and_send_otp(self, otp_length: int) -> str:
        """Run the whole workflow and return the message that was sent."""
        otp = self.gen_random_otp(otp_length)
        self.save_otp_cache(otp)
        message = self.get_message(otp)
        self.send_notification(message)
        return message

    @abstractmethod
    def gen_random_otp(self, length: int) -> str:
        """Return a new one-time password."""

    @abstractmethod
    def save_otp_cache(self, otp: str) -> None:
        """Remember the password for later checking."""

    @abstractmethod
    def get_message(self, otp: str) -> str:
        """Return the text that carries the password."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver the message; raise on failure."""


class Sms(Otp):
    """Sends the one-time password by SMS."""

    def gen_random_otp(self, length: int) -> str:
        return _issue_otp("SMS")

    def save_otp_cache(self, otp: str) -> None:
        print(f"SMS: saving otp: {otp} to cache")

    def get_message(self, otp: str) -> str:
        return "SMS OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"SMS: sending sms: {message}")


class Email(Otp):
    """Sends the one-time password by e-mail."""

    def gen_random_otp(self, length: int) -> str:
        return _issue_otp("EMAIL")

    def save_otp_cache(self, otp: str) -> None:
        print(f"EMAIL: saving otp: {otp} to cache")

    def get_message(self, otp: str) -> str:
        return "EMAIL OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"EMAIL: sending email: {message}")


def main(argv: list[str] | None = None) -> None:
    Sms().gen_and_send_otp(4)
    print("")
    Email().gen_and_send_otp(4)


if __name__ == "__main__":
    main()