"""
Notifications Module - Admin Telegram notifications for new contact messages
"""

import requests
import threading
from flask import current_app
from .site_content import PROJECT_TYPES

TELEGRAM_API_URL = 'https://api.telegram.org/bot{token}/sendMessage'


def get_admin_telegram_credentials():
    """Admin bot token and chat id from configuration, (None, None) when unset"""
    return (current_app.config.get('ADMIN_TELEGRAM_BOT_TOKEN'),
            current_app.config.get('ADMIN_TELEGRAM_CHAT_ID'))


def send_telegram_message(bot_token, chat_id, message_text, timeout=10):
    """
    Post a message through the Telegram Bot API

    Returns:
        bool: True if Telegram accepted the message, False otherwise
    """
    url = TELEGRAM_API_URL.format(token=bot_token)
    payload = {
        'chat_id': chat_id,
        'text': message_text,
        'parse_mode': 'HTML'
    }
    try:
        response = requests.post(url, json=payload, timeout=timeout)
    except requests.RequestException as e:
        current_app.logger.error(f"Telegram notification error: {str(e)}")
        return False
    if response.status_code != 200:
        current_app.logger.error(f"Telegram API error: {response.status_code}")
        return False
    current_app.logger.info("Admin Telegram notification sent")
    return True


def format_contact_notification(row):
    message = row.get('message', '')
    project_label = PROJECT_TYPES.get(row.get('project_type'), row.get('project_type'))
    return (
        f"📧 <b>New Contact Message</b>\n\n"
        f"👤 <b>From:</b> {row.get('name')}\n"
        f"📧 <b>Email:</b> {row.get('email')}\n"
        f"🧩 <b>Project:</b> {project_label}\n"
        f"💬 <b>Message:</b>\n{message[:300]}{'...' if len(message) > 300 else ''}"
    )


def notify_new_contact_message(row, background=True):
    """
    Tell the admin about a stored contact message, best effort

    Args:
        row (dict): The inserted contact_messages row
        background (bool): Send from a worker thread so the request is not delayed

    Returns:
        bool: False when credentials are not configured, True once the send is dispatched
    """
    bot_token, chat_id = get_admin_telegram_credentials()
    if not (bot_token and chat_id):
        current_app.logger.debug("Admin Telegram credentials not configured")
        return False

    text = format_contact_notification(row)
    if not background:
        return send_telegram_message(bot_token, chat_id, text)

    app = current_app._get_current_object()

    def _send():
        with app.app_context():
            send_telegram_message(bot_token, chat_id, text)

    threading.Thread(target=_send, daemon=True).start()
    return True


__all__ = [
    'get_admin_telegram_credentials',
    'send_telegram_message',
    'format_contact_notification',
    'notify_new_contact_message'
]
