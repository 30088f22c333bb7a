"""One-time DB setup: create tables and seed demo accounts plus a sample quiz."""
from quizapp.db.session import Base, get_engine, get_session_factory
from quizapp.db.models import Quiz, RoleEnum, User
from quizapp.core.security import hash_password

# 1. Create all tables
engine = get_engine()
Base.metadata.create_all(bind=engine)
print("✅ All tables created")

session_factory = get_session_factory()
with session_factory() as db:
    # 2. Test admin user
    admin = db.query(User).filter(User.email == "admin@example.com").first()
    if not admin:
        admin = User(
            name="Admin User",
            email="admin@example.com",
            hashed_password=hash_password("admin123"),
            role=RoleEnum.ADMIN,
            hashed_admin_key=hash_password("admin-key"),
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        print("✅ Created admin: admin@example.com / admin123 (key: admin-key)")
    else:
        print("  Admin user already exists")

    # 3. Test student user
    student = db.query(User).filter(User.email == "student@example.com").first()
    if not student:
        student = User(
            name="Student User",
            email="student@example.com",
            hashed_password=hash_password("student123"),
            role=RoleEnum.STUDENT,
        )
        db.add(student)
        db.commit()
        print("✅ Created student: student@example.com / student123")
    else:
        print("  Student user already exists")

    # 4. Sample quiz
    if not db.query(Quiz).filter(Quiz.title == "General Knowledge").first():
        db.add(
            Quiz(
                title="General Knowledge",
                description="A short warm-up quiz",
                time_limit=5,
                created_by=admin.id,
                questions=[
                    {
                        "question": "What is the capital of France?",
                        "options": ["Berlin", "Paris", "Madrid"],
                        "correct_answer": 1,
                    },
                    {
                        "question": "How many days are in a leap year?",
                        "options": ["366", "365"],
                        "correct_answer": 0,
                    },
                    {
                        "question": "Which planet is known as the Red Planet?",
                        "options": ["Venus", "Jupiter", "Mars", "Saturn"],
                        "correct_answer": 2,
                    },
                ],
            )
        )
        db.commit()
        print("✅ Created sample quiz: General Knowledge")
    else:
        print("  Sample quiz already exists")

print("🎉 Database ready")
