"""
Email domain rules for student verification.

An address qualifies when it is syntactically valid and matches one of the
educational domains below. A domain matches when the address ends with it
or contains it anywhere, so ``student@iitm.ac.in.example.com`` is accepted.
Matching is case-sensitive.
"""

from email_validator import EmailNotValidError, validate_email

from .exceptions import EmailDomainNotAllowedError, InvalidEmailError


EDUCATIONAL_DOMAINS: tuple[str, ...] = (
    ".edu",
    "@stanford.edu",
    "@mit.edu",
    "@harvard.edu",
    "@iitm.ac.in",
    "@iitd.ac.in",
    "@iitb.ac.in",
    "@berkeley.edu",
    "@ucla.edu",
)


def _is_well_formed(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def matches_educational_domain(email: str) -> bool:
    return any(email.endswith(domain) or domain in email for domain in EDUCATIONAL_DOMAINS)


def is_educational_email(email: str) -> bool:
    """True if the address is well-formed and from a recognized institution."""
    return _is_well_formed(email) and matches_educational_domain(email)


def check_educational_email(email: str) -> None:
    """
    Validate a verification email.

    Raises:
        InvalidEmailError: If the address is malformed
        EmailDomainNotAllowedError: If no educational domain matches
    """
    if not _is_well_formed(email):
        raise InvalidEmailError(email)
    if not matches_educational_domain(email):
        raise EmailDomainNotAllowedError(email)
