from leave_tracker.database import SessionLocal, init_db
from leave_tracker.models.branch import Branch

DEFAULT_BRANCHES = ["Careplus Chemist", "Wilmslow Road Pharmacy", "247 Pharmacy"]

def seed():
    init_db()
    db = SessionLocal()
    try:
        for name in DEFAULT_BRANCHES:
            branch = db.query(Branch).filter(Branch.name == name).first()
            if branch:
                print(f"Branch '{name}' already exists")
                continue
            db.add(Branch(name=name))
            db.commit()
            print(f"Created branch: {name}")
    finally:
        db.close()

if __name__ == "__main__":
    seed()
