# seed_data.py
"""
Seed database with a demo user and print a session token for it
Run: python seed_data.py
"""

from app.database import SessionLocal, engine, Base
from app.models.user import User
from app.models.cover_letter import CoverLetter, CoverLetterStatus
from app.utils.security import create_session_token

DEMO_SUBJECT = "user_demo_0001"

# Create tables AFTER all imports
Base.metadata.create_all(bind=engine)


def seed_database():
    db = SessionLocal()

    try:
        print("Clearing existing data...")
        db.query(CoverLetter).delete()
        db.query(User).delete()
        db.commit()

        print("Creating demo user...")
        user = User(
            clerk_user_id=DEMO_SUBJECT,
            email="demo@senseai.dev",
            name="Demo User",
            industry="tech-software-development",
            experience=4,
            skills=["Python", "FastAPI", "PostgreSQL", "Docker"],
            bio="Backend engineer who enjoys building data-heavy APIs.",
        )
        db.add(user)
        db.flush()

        db.add(CoverLetter(
            user_id=user.id,
            content="Dear Hiring Manager,\n\nThis is a sample letter.",
            job_description="Build and operate Python services.",
            company_name="Acme Corp",
            job_title="Backend Engineer",
            status=CoverLetterStatus.COMPLETED.value,
        ))
        db.commit()

        print(f"Demo user: {user.email}")
        print(f"Session token: {create_session_token(DEMO_SUBJECT)}")

    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
