"""
Repository for dashboard user accounts.
"""

import sqlite3
from typing import Optional
import bcrypt
from .db import Database
from .models import User
from core.exceptions import DatabaseError, UserAlreadyExistsError
from core.types import Username, Email, Password

class UserRepository:
    """
    Repository for managing dashboard users with bcrypt password hashing.
    """

    def __init__(self, db: Database, bcrypt_rounds: int = 12) -> None:
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def create_user(self, username: Username, email: Email, password: Password) -> int:
        """
        Create a new user with a hashed password and return its id.
        """
        password_hash = bcrypt.hashpw(
            password.encode('utf-8'), bcrypt.gensalt(rounds=self.bcrypt_rounds)
        ).decode('utf-8')

        try:
            with self.db.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO users (username, email, password_hash)
                    VALUES (?, ?, ?)
                    """,
                    (username, email, password_hash),
                )
                return cursor.lastrowid
        except sqlite3.IntegrityError as e:
            if "users.email" in str(e):
                raise UserAlreadyExistsError(email)
            raise UserAlreadyExistsError(username)
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to create user: {e}")

    def get_user_by_email(self, email: Email) -> Optional[User]:
        query = "SELECT * FROM users WHERE email = ?"
        result = self.db.execute_query(query, (email,))
        return User.from_row(result[0]) if result else None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        query = "SELECT * FROM users WHERE id = ?"
        result = self.db.execute_query(query, (user_id,))
        return User.from_row(result[0]) if result else None

    def verify_credentials(self, email: Email, password: Password) -> Optional[User]:
        """
        Return the user when the password matches, otherwise None.
        Unknown email and wrong password are indistinguishable to the caller.
        """
        user = self.get_user_by_email(email)
        if not user:
            return None

        try:
            if bcrypt.checkpw(password.encode('utf-8'), user.password_hash.encode('utf-8')):
                return user
        except ValueError:
            # Stored hash is not a valid bcrypt hash
            return None

        return None

    def get_user_count(self) -> int:
        query = "SELECT COUNT(*) as count FROM users"
        result = self.db.execute_query(query)
        return result[0]['count'] if result else 0
