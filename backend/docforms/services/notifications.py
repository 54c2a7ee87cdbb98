"""
Outbound e-mail (SMTP or Resend API) and SMS (SMS.ru) delivery

E-mail goes over SMTP when a mailbox login is configured, otherwise through
Resend. Without credentials a sender only logs the message, so local
development works with no external accounts.
"""

import logging
import re
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional, Tuple

import aiosmtplib
import httpx

from docforms.core.config import settings
from docforms.core.exceptions import NotificationError

logger = logging.getLogger(__name__)

RESEND_URL = "https://api.resend.com/emails"
SMS_RU_URL = "https://sms.ru/sms/send"

VERIFICATION_EMAIL_SUBJECT = "Код подтверждения - МойДокумент"

VERIFICATION_EMAIL_HTML = """<!DOCTYPE html>
<html lang="ru">
<head>
  <meta charset="UTF-8">
  <title>Код подтверждения</title>
</head>
<body style="margin: 0; padding: 0; font-family: 'Segoe UI', Arial, sans-serif; background-color: #f5f5f5;">
  <div style="max-width: 600px; margin: 40px auto; background-color: white; border-radius: 8px;">
    <div style="background: #667eea; padding: 30px; text-align: center;">
      <h1 style="color: white; margin: 0; font-size: 24px;">{app_name}</h1>
    </div>
    <div style="padding: 40px 30px;">
      <h2 style="color: #333; margin: 0 0 20px 0; font-size: 20px;">Подтверждение регистрации</h2>
      <p style="color: #666;">Ваш код подтверждения:</p>
      <div style="font-size: 32px; font-weight: bold; color: #667eea; letter-spacing: 8px; text-align: center;">{code}</div>
      <p style="color: #666; font-size: 14px;">Код действителен в течение <strong>{ttl} минут</strong>.</p>
      <p style="color: #999; font-size: 12px;">Если вы не регистрировались на нашем сайте, просто проигнорируйте это письмо.</p>
    </div>
  </div>
</body>
</html>
"""


def clean_phone(phone: str) -> str:
    return re.sub(r"\D", "", phone)


def smtp_server_for(login: str) -> Tuple[str, int]:
    """Pick the implicit-TLS SMTP server from the mailbox domain"""
    if "@gmail.com" in login:
        return "smtp.gmail.com", 465
    if "@yandex" in login:
        return "smtp.yandex.ru", 465
    return "smtp.mail.ru", 465


class NotificationService:
    def __init__(
        self,
        resend_api_key: Optional[str] = None,
        sms_api_key: Optional[str] = None,
        smtp_user: Optional[str] = None,
        smtp_password: Optional[str] = None,
        timeout: Optional[float] = None,
        retries: int = 1
    ):
        self.resend_api_key = resend_api_key if resend_api_key is not None else settings.RESEND_API_KEY
        self.sms_api_key = sms_api_key if sms_api_key is not None else settings.SMS_RU_API_KEY
        self.smtp_user = smtp_user if smtp_user is not None else settings.SMTP_USER
        self.smtp_password = smtp_password if smtp_password is not None else settings.SMTP_PASSWORD
        self.timeout = timeout if timeout is not None else settings.NOTIFICATION_TIMEOUT
        self.retries = retries

    async def send_email(self, to: str, subject: str, html: str) -> None:
        if self.smtp_user and self.smtp_password:
            await self._send_smtp(to, subject, html)
            return

        if not self.resend_api_key:
            logger.info(f"Email (dev mode, no API key) to {to}: {subject}")
            return

        payload = {"from": settings.EMAIL_FROM, "to": to, "subject": subject, "html": html}
        headers = {"Authorization": f"Bearer {self.resend_api_key}"}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            async def attempt() -> bool:
                response = await client.post(RESEND_URL, json=payload, headers=headers)
                if response.status_code < 300 and response.json().get("id"):
                    return True
                logger.error(f"Resend rejected email to {to}: HTTP {response.status_code} {response.text}")
                return False

            await self._deliver("email", to, attempt, (httpx.HTTPError, ValueError))

    async def _send_smtp(self, to: str, subject: str, html: str) -> None:
        message = EmailMessage()
        message["From"] = formataddr((settings.SMTP_SENDER_NAME, self.smtp_user))
        message["Reply-To"] = settings.EMAIL_REPLY_TO
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html, subtype="html")

        hostname, port = smtp_server_for(self.smtp_user)

        async def attempt() -> bool:
            await aiosmtplib.send(
                message,
                hostname=hostname,
                port=port,
                username=self.smtp_user,
                password=self.smtp_password,
                use_tls=True,
                timeout=self.timeout
            )
            return True

        await self._deliver("email", to, attempt, (aiosmtplib.SMTPException, OSError))

    async def send_sms(self, phone: str, message: str) -> None:
        if not self.sms_api_key:
            logger.info(f"SMS (dev mode, no API key) to {phone}: {message}")
            return

        params = {"api_id": self.sms_api_key, "to": clean_phone(phone), "msg": message, "json": "1"}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            async def attempt() -> bool:
                response = await client.get(SMS_RU_URL, params=params)
                data = response.json()
                if data.get("status") == "OK":
                    return True
                logger.error(f"SMS.ru rejected message to {phone}: {data}")
                return False

            await self._deliver("sms", phone, attempt, (httpx.HTTPError, ValueError))

    async def send_verification_email(self, email: str, code: str) -> None:
        html = VERIFICATION_EMAIL_HTML.format(
            app_name=settings.APP_NAME, code=code, ttl=settings.VERIFICATION_CODE_TTL_MINUTES
        )
        try:
            await self.send_email(email, VERIFICATION_EMAIL_SUBJECT, html)
        except NotificationError:
            logger.warning(f"Verification code for {email} was not delivered: {code}")
            raise

    async def send_verification_sms(self, phone: str, code: str) -> None:
        try:
            await self.send_sms(phone, f"Ваш код подтверждения: {code}\n\n{settings.APP_NAME}")
        except NotificationError:
            logger.warning(f"Verification code for {phone} was not delivered: {code}")
            raise

    async def _deliver(self, channel: str, recipient: str, attempt, transient_errors) -> None:
        """Run attempt() up to retries + 1 times; it returns False on a rejected send"""
        for number in range(self.retries + 1):
            try:
                if await attempt():
                    logger.info(f"Sent {channel} to {recipient}")
                    return
            except transient_errors as e:
                logger.warning(f"{channel} delivery attempt {number + 1} to {recipient} failed: {e}")

        raise NotificationError(f"Failed to send {channel} to {recipient}")
