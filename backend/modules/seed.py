"""
Sample data for demos and local development.

Loaded into a fresh store when ``SEED_SAMPLE_DATA`` is on.
"""

from datetime import timedelta

from modules.moderation.models import ModerationStatus, PostCreate, PostPriority
from modules.users.models import UserCreate, UserStatus
from modules.verifications.models import VerificationCreate, VerificationStatus
from shared.models import utc_now


SAMPLE_USERS = [
    UserCreate(
        email="john.doe@stanford.edu",
        username="johndoe",
        full_name="John Doe",
        college="Stanford University",
        verified=True,
        verification_status=VerificationStatus.APPROVED,
        id_uploaded=True,
        id_url="https://example.com/id1.jpg",
        status=UserStatus.ACTIVE,
    ),
    UserCreate(
        email="sarah.smith@mit.edu",
        username="sarahsmith",
        full_name="Sarah Smith",
        college="MIT",
        id_uploaded=True,
        id_url="https://example.com/id2.jpg",
    ),
    UserCreate(
        email="mike.johnson@harvard.edu",
        username="mikej",
        full_name="Mike Johnson",
        college="Harvard University",
        verified=True,
        verification_status=VerificationStatus.APPROVED,
        id_uploaded=True,
        id_url="https://example.com/id3.jpg",
        status=UserStatus.ACTIVE,
    ),
    UserCreate(
        email="alice.wong@berkeley.edu",
        username="alicew",
        full_name="Alice Wong",
        college="UC Berkeley",
        verification_status=VerificationStatus.REJECTED,
        id_uploaded=True,
        id_url="https://example.com/id4.jpg",
    ),
    UserCreate(
        email="raj.patel@iitm.ac.in",
        username="rajpatel",
        full_name="Raj Patel",
        college="IIT Madras",
    ),
]

# (request, minutes ago)
SAMPLE_VERIFICATIONS = [
    (VerificationCreate(
        user_id=1,
        email="sarah.j@stanford.edu",
        full_name="Sarah Johnson",
        college="Stanford University",
    ), 2),
    (VerificationCreate(
        user_id=2,
        email="mchen@mit.edu",
        full_name="Michael Chen",
        college="MIT",
    ), 5),
    (VerificationCreate(
        user_id=3,
        email="priya@iitm.ac.in",
        full_name="Priya Sharma",
        college="IIT Madras",
    ), 8),
]

SAMPLE_FLAGGED_POSTS = [
    (PostCreate(
        user_id=4,
        content=(
            "Post contains inappropriate language and was flagged by multiple users. "
            "Content discusses exam cheating methods..."
        ),
        moderation_status=ModerationStatus.FLAGGED,
        flagged_by={"user123", "user456", "user789"},
        flag_reason="Inappropriate content and academic dishonesty",
        priority=PostPriority.HIGH,
    ), 10),
    (PostCreate(
        user_id=5,
        content=(
            "Spam detection: User posted the same content multiple times "
            "across different forums..."
        ),
        moderation_status=ModerationStatus.FLAGGED,
        flagged_by={"user101"},
        flag_reason="Spam",
        priority=PostPriority.MEDIUM,
    ), 25),
]

SAMPLE_STATS = {
    "total_users": 2847,
    "pending_verifications": 43,
    "active_chats": 186,
    "api_requests": 12400,
}


def seed_store(store) -> None:
    """Fill an empty store with the sample data."""
    now = utc_now()

    for user in SAMPLE_USERS:
        store.users.create(user, created_at=now - timedelta(days=30))

    for request, minutes_ago in SAMPLE_VERIFICATIONS:
        store.verifications.create(request, created_at=now - timedelta(minutes=minutes_ago))

    for post, minutes_ago in SAMPLE_FLAGGED_POSTS:
        store.posts.create(post, created_at=now - timedelta(minutes=minutes_ago))

    store.stats.initialize(**SAMPLE_STATS)
