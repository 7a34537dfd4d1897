"""
User storage service with JSON-based persistence.

The whole roster lives in one pretty-printed JSON array. Every read loads the
full file and every write replaces it; there is no cache and no locking.

Mutations work on the raw records so that entries the User model rejects
(no mail, unknown type) are carried through a rewrite unchanged.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from limetools.models.user import User
from limetools.utils.exceptions import DuplicateEmailError, StoreError, UserNotFoundError
from limetools.utils.logger import get_logger

logger = get_logger(__name__)

# Mode for a users file that does not exist yet; an existing file keeps its own
NEW_FILE_MODE = 0o644


def _record_email(record: Any) -> Optional[str]:
    return record.get("mail") if isinstance(record, dict) else None


class UserStore:
    """Roster storage backed by a single JSON file"""

    def __init__(self, users_path: Union[str, Path]):
        self.users_path = Path(users_path)

    def _load_records(self) -> List[Any]:
        """Raw roster entries; a missing or unparseable document is empty"""
        if not self.users_path.exists():
            return []

        try:
            with open(self.users_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Users file unreadable, treating roster as empty", path=str(self.users_path), error=str(e))
            return []

        if not isinstance(data, list):
            logger.warning("Users file is not a JSON array, treating roster as empty", path=str(self.users_path))
            return []
        return data

    def load_users(self) -> List[User]:
        """Load all valid users; records the model rejects are skipped"""
        users = []
        for index, record in enumerate(self._load_records()):
            try:
                users.append(User(**record))
            except (TypeError, ValidationError) as e:
                logger.warning("Skipping invalid user record", index=index, email=_record_email(record), error=str(e))
        return users

    def save_users(self, users: List[User]) -> None:
        """Replace the whole roster on disk"""
        self._atomic_write([user.to_record() for user in users])

    def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email"""
        for user in self.load_users():
            if user.email == email:
                return user
        return None

    def create_user(self, user: User) -> User:
        """Append a new user; the email must not be taken"""
        records = self._load_records()

        if any(_record_email(r) == user.email for r in records):
            raise DuplicateEmailError(user.email)

        records.append(user.to_record())
        self._atomic_write(records)
        logger.info("User created", email=user.email, role=user.role)
        return user

    def update_user(self, original_email: str, user: User) -> User:
        """Fully replace the record stored under original_email"""
        records = self._load_records()

        for i, record in enumerate(records):
            if _record_email(record) == original_email:
                # No uniqueness check here: an update may collide with another record
                records[i] = user.to_record()
                self._atomic_write(records)
                logger.info("User updated", original_email=original_email, email=user.email)
                return user

        raise UserNotFoundError(original_email)

    def delete_user(self, email: str) -> None:
        """Remove every record with this email; unknown emails are ignored"""
        records = self._load_records()
        remaining = [r for r in records if _record_email(r) != email]
        self._atomic_write(remaining)
        if len(remaining) != len(records):
            logger.info("User deleted", email=email)

    def ensure_seed_admin(self, email: Optional[str], password: Optional[str]) -> bool:
        """
        Write a roster holding a single admin when no users file exists yet.

        Returns True if the seed was written. An existing file, even an empty
        or broken one, is left untouched.
        """
        if not email or not password or self.users_path.exists():
            return False

        admin = User(name="Admin", surname="", email=email, password=password, role="admin")
        self.save_users([admin])
        logger.info("Seeded default admin user", email=email, path=str(self.users_path))
        return True

    def _atomic_write(self, data: list) -> None:
        """Write JSON file atomically, keeping the permissions of the file it replaces"""
        path = self.users_path
        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(mode="w", dir=path.parent, delete=False, encoding="utf-8") as tf:
                temp_path = Path(tf.name)
                json.dump(data, tf, indent=2, ensure_ascii=False)

            # NamedTemporaryFile creates the file owner-only
            if path.exists():
                shutil.copymode(str(path), str(temp_path))
            else:
                os.chmod(temp_path, NEW_FILE_MODE)

            shutil.move(str(temp_path), str(path))
        except Exception as e:
            # Clean up temp file if any step failed
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()
            raise StoreError(f"Failed to save users to {path}: {str(e)}")
