"""
Contact Module - Contact form submission handling

A submission moves IDLE -> SUBMITTING -> SUCCESS | FAILED and the handler
returns to IDLE once the outcome is produced. Failed submissions keep the
typed values so the visitor can retry; successful ones clear them.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from flask import current_app

from .data import DataClientError
from .site_content import PROJECT_TYPES

REQUIRED_FIELDS = ('name', 'email', 'project_type', 'message')
MAX_FIELD_LENGTH = 255
MAX_MESSAGE_LENGTH = 5000
EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')

SUCCESS_TITLE = 'Message Sent Successfully!'
SUCCESS_MESSAGE = "Thank you for contacting us. We'll get back to you within 24 hours."
ERROR_TITLE = 'Error'
ERROR_MESSAGE = 'Something went wrong. Please try again.'
INVALID_TITLE = 'Missing information'
INVALID_MESSAGE = 'Please fill in all required fields.'


class SubmissionState(Enum):
    IDLE = 'idle'
    SUBMITTING = 'submitting'
    SUCCESS = 'success'
    FAILED = 'failed'


@dataclass(frozen=True)
class Notification:
    """Transient message shown to the visitor after a submission"""
    title: str
    message: str
    category: str  # flash category: success | danger


@dataclass(frozen=True)
class SubmissionResult:
    state: SubmissionState
    notification: Notification
    values: Dict[str, str]
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self):
        return self.state is SubmissionState.SUCCESS


def empty_values():
    return {name: '' for name in REQUIRED_FIELDS}


def read_values(form):
    """Pull the four fields from a form mapping, trimmed"""
    return {name: (form.get(name) or '').strip() for name in REQUIRED_FIELDS}


def validate(values):
    """
    Required-field gate

    Returns:
        dict: field name -> error text, empty when the submission may proceed
    """
    errors = {}
    for name in REQUIRED_FIELDS:
        if not values.get(name):
            errors[name] = 'This field is required.'
    if values.get('email') and not EMAIL_PATTERN.match(values['email']):
        errors['email'] = 'Enter a valid email address.'
    if values.get('project_type') and values['project_type'] not in PROJECT_TYPES:
        errors['project_type'] = 'Select a project type.'
    for name in ('name', 'email'):
        if len(values.get(name, '')) > MAX_FIELD_LENGTH:
            errors[name] = f'Keep this under {MAX_FIELD_LENGTH} characters.'
    return errors


class ContactSubmission:
    """
    Drives contact form submissions against a data client

    The /contact route builds a fresh instance per request. The SUBMITTING
    guard in submit() only matters when one instance is reused, e.g. by a
    caller that keeps it around between submissions.
    """

    def __init__(self, client, notify: Optional[Callable[[dict], object]] = None):
        self.client = client
        self.notify = notify
        self.state = SubmissionState.IDLE

    def submit(self, form):
        if self.state is not SubmissionState.IDLE:
            raise RuntimeError(f"Submission already in progress ({self.state.value})")

        self.state = SubmissionState.SUBMITTING
        try:
            return self._submit(read_values(form))
        finally:
            self.state = SubmissionState.IDLE

    def _submit(self, values):
        errors = validate(values)
        if errors:
            return SubmissionResult(
                state=SubmissionState.FAILED,
                notification=Notification(INVALID_TITLE, INVALID_MESSAGE, 'danger'),
                values=values,
                errors=errors)

        row = dict(values, message=values['message'][:MAX_MESSAGE_LENGTH])
        try:
            self.client.insert('contact_messages', row)
        except DataClientError as e:
            current_app.logger.error(f"Contact form error: {str(e)}")
            return SubmissionResult(
                state=SubmissionState.FAILED,
                notification=Notification(ERROR_TITLE, ERROR_MESSAGE, 'danger'),
                values=values)

        current_app.logger.info(f"Contact message stored from {row['email']} ({row['project_type']})")
        if self.notify:
            self.notify(row)

        return SubmissionResult(
            state=SubmissionState.SUCCESS,
            notification=Notification(SUCCESS_TITLE, SUCCESS_MESSAGE, 'success'),
            values=empty_values())


__all__ = [
    'REQUIRED_FIELDS',
    'MAX_MESSAGE_LENGTH',
    'SubmissionState',
    'Notification',
    'SubmissionResult',
    'empty_values',
    'read_values',
    'validate',
    'ContactSubmission'
]
