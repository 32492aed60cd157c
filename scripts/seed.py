"""
Seed script - populates the database with demo members for development.

Usage:
    python -m scripts.seed

Creates three members who complement each other (John teaches React and
wants design, Jane teaches design and wants JavaScript, Mike teaches
marketing and wants Python), so matchmaking has candidates straight away.

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing users before inserting.
"""
import asyncio

from sqlalchemy import select

from skilltrade.core.database import async_session_maker, init_db
from skilltrade.core.security import hash_password
from skilltrade.models.skill import Skill
from skilltrade.models.time_credit import TimeCreditTransaction, CREDIT_BONUS
from skilltrade.models.user import User
from skilltrade.services.profile_service import compute_profile_completion


DEMO_PASSWORD = "Password123"

# ─── Demo members ──────────────────────────────────────────────
# skills: (name, category, type, proficiency_level, description)

USERS = [
    {
        "email": "john.doe@example.com",
        "first_name": "John",
        "last_name": "Doe",
        "bio": "Experienced web developer passionate about teaching React and Node.js",
        "location": "San Francisco, CA",
        "occupation": "Software Engineer",
        "time_credits": 10,
        "skills": [
            ("React Development", "Programming", "offering", 5,
             "Advanced React development including hooks, context, and performance optimization"),
            ("Node.js", "Programming", "offering", 4,
             "Backend development with Express, APIs, and database integration"),
            ("Graphic Design", "Design", "seeking", 2,
             "Want to learn basic graphic design principles and tools"),
        ],
    },
    {
        "email": "jane.smith@example.com",
        "first_name": "Jane",
        "last_name": "Smith",
        "bio": "Graphic designer with 5+ years experience. Love to share design knowledge!",
        "location": "New York, NY",
        "occupation": "UX Designer",
        "time_credits": 8,
        "skills": [
            ("UI/UX Design", "Design", "offering", 5,
             "Complete user interface and experience design process"),
            ("Adobe Creative Suite", "Design", "offering", 4,
             "Photoshop, Illustrator, and InDesign expertise"),
            ("Graphic Design", "Design", "offering", 4, None),
            ("JavaScript", "Programming", "seeking", 3,
             "Looking to improve JavaScript skills for better design-dev collaboration"),
        ],
    },
    {
        "email": "mike.wilson@example.com",
        "first_name": "Mike",
        "last_name": "Wilson",
        "bio": "Marketing professional looking to learn programming skills",
        "location": "Austin, TX",
        "occupation": "Marketing Manager",
        "time_credits": 5,
        "skills": [
            ("Digital Marketing", "Marketing", "offering", 4,
             "SEO, social media marketing, and content strategy"),
            ("Python Programming", "Programming", "seeking", 1,
             "Complete beginner wanting to learn Python for data analysis"),
        ],
    },
]


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    async with async_session_maker() as db:
        created = 0
        for data in USERS:
            existing = await db.execute(select(User).where(User.email == data["email"]))
            if existing.scalar_one_or_none():
                print(f"  {data['email']} already exists, skipping...")
                continue

            user = User(
                email=data["email"],
                password_hash=hash_password(DEMO_PASSWORD),
                first_name=data["first_name"],
                last_name=data["last_name"],
                bio=data["bio"],
                location=data["location"],
                occupation=data["occupation"],
                time_credits=data["time_credits"],
                is_verified=True,
            )
            db.add(user)
            await db.flush()

            for name, category, skill_type, level, description in data["skills"]:
                db.add(
                    Skill(
                        user_id=user.id,
                        name=name,
                        category=category,
                        type=skill_type,
                        proficiency_level=level,
                        description=description,
                    )
                )

            # Opening balance goes through the ledger like any other credit
            db.add(
                TimeCreditTransaction(
                    user_id=user.id,
                    amount=data["time_credits"],
                    type=CREDIT_BONUS,
                    description="Welcome bonus",
                )
            )
            user.profile_completion = compute_profile_completion(user, len(data["skills"]))
            created += 1
            print(f"  Created {data['email']} with {len(data['skills'])} skills")

        await db.commit()

    print(f"\nDone! {created} new members. Log in with any demo email and password '{DEMO_PASSWORD}'.")


if __name__ == "__main__":
    asyncio.run(seed())
