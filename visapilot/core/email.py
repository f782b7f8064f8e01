import aiosmtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from visapilot.config import settings
from visapilot.core.logging import logger
from typing import List, Optional


async def send_email(
    to: List[str],
    subject: str,
    body: str,
    html_body: Optional[str] = None
) -> bool:
    """
    Send an email over SMTP.
    
    Args:
        to: List of recipient email addresses
        subject: Email subject
        body: Plain text email body
        html_body: Optional HTML email body
        
    Returns:
        bool: True if email sent successfully
    """
    logger.info(f"Sending email to {', '.join(to)}")
    logger.debug(f"SMTP: {settings.SMTP_HOST}:{settings.SMTP_PORT}, User: {settings.SMTP_USER}")
    
    message = MIMEMultipart("alternative")
    message["From"] = settings.EMAIL_FROM
    message["To"] = ", ".join(to)
    message["Subject"] = subject
    message.attach(MIMEText(body, "plain"))
    if html_body:
        message.attach(MIMEText(html_body, "html"))
    
    try:
        await aiosmtplib.send(
            message,
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USER or None,
            password=settings.SMTP_PASSWORD or None,
            start_tls=True,
        )
    except aiosmtplib.SMTPAuthenticationError as e:
        logger.error(f"SMTP authentication failed for {settings.SMTP_USER}: {e}")
        return False
    except (aiosmtplib.SMTPException, OSError) as e:
        logger.error(f"SMTP error sending email to {to}: {type(e).__name__}: {e}")
        return False
    
    logger.info(f"Email sent successfully to {', '.join(to)}")
    return True


async def send_otp_email(email: str, otp_code: str) -> bool:
    """
    Send a login verification code.
    
    Args:
        email: Recipient email address
        otp_code: The one-time code in clear text
        
    Returns:
        bool: True if email sent successfully
    """
    minutes = settings.OTP_EXPIRE_MINUTES
    subject = f"Your {settings.APP_NAME} verification code"
    
    body = f"""
    Hello,
    
    Your {settings.APP_NAME} verification code is {otp_code}.
    It expires in {minutes} minutes.
    
    If you didn't try to sign in, please ignore this email.
    """
    
    html_body = f"""
    <html>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                <h2 style="color: #4F46E5;">Verification code</h2>
                <p>Your {settings.APP_NAME} verification code is:</p>
                <p style="font-size: 28px; letter-spacing: 6px; font-weight: bold;">{otp_code}</p>
                <p style="color: #666; font-size: 14px;">It expires in {minutes} minutes.</p>
            </div>
        </body>
    </html>
    """
    
    return await send_email([email], subject, body, html_body)
