from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from heybuddy.config import settings
from heybuddy.database import get_db
from heybuddy.models.syllabus import Syllabus
from heybuddy.models.todo import Todo
from heybuddy.schemas.todo import TodoCreate, TodoUpdate, TodoResponse

router = APIRouter(prefix="/api/todos", tags=["Todos"])


@router.get("", response_model=List[TodoResponse])
async def get_todos(db: Session = Depends(get_db)):
    """Get all todos for the current user, soonest due first."""
    return db.query(Todo).filter(
        Todo.user_id == settings.DEFAULT_USER_ID
    ).order_by(Todo.due_date.asc(), Todo.id.asc()).all()


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(todo_data: TodoCreate, db: Session = Depends(get_db)):
    """Create a todo attached to one of the user's syllabi."""
    syllabus = db.query(Syllabus).filter(
        Syllabus.id == todo_data.syllabus_id,
        Syllabus.user_id == settings.DEFAULT_USER_ID
    ).first()

    if not syllabus:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Syllabus not found"
        )

    new_todo = Todo(
        user_id=settings.DEFAULT_USER_ID,
        syllabus_id=syllabus.id,
        task=todo_data.task,
        due_date=todo_data.due_date,
        completed=todo_data.completed,
    )
    db.add(new_todo)
    db.commit()
    db.refresh(new_todo)

    return new_todo


@router.patch("/{todo_id}", response_model=TodoResponse)
async def update_todo(todo_id: int, todo_data: TodoUpdate, db: Session = Depends(get_db)):
    """Mark a todo completed or not completed."""
    todo = db.query(Todo).filter(
        Todo.id == todo_id,
        Todo.user_id == settings.DEFAULT_USER_ID
    ).first()

    if not todo:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Todo not found"
        )

    todo.completed = todo_data.completed
    db.commit()
    db.refresh(todo)

    return todo
