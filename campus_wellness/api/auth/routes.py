from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from campus_wellness.db.session import get_db
from campus_wellness.db.models.user import User
from campus_wellness.api.auth import schemas, services
from campus_wellness.core.security import create_access_token, get_current_user

router = APIRouter()


@router.post("/register", status_code=201)
def register(user: schemas.UserCreate, db: Session = Depends(get_db)):
    if services.get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    services.create_user(db, user)
    return {"message": "User created successfully"}


@router.post("/login", response_model=schemas.Token)
def login(credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    db_user = services.authenticate_user(db, credentials.email, credentials.password)
    if not db_user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_access_token({"sub": db_user.email})
    return {"access_token": token, "token_type": "bearer"}


@router.get("/me", response_model=schemas.UserOut)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
