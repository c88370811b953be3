"""
User Management API Routes
Thin HTTP layer over UserService: CRUD for users, domain errors mapped to status codes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from usermgmt.models.user import UserDTO, UserPrivateDTO
from usermgmt.services.user_service import (
    DataConflictError,
    ObjectNotFoundError,
    UserService,
    get_user_service,
)

router = APIRouter()


@router.get("/users", response_model=List[UserDTO])
def list_users(service: UserService = Depends(get_user_service)):
    """List all users"""
    return service.find_all_users()


@router.get("/users/{user_id}", response_model=UserDTO)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Get a user by ID"""
    try:
        return service.find_by_id(user_id)
    except ObjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/users", response_model=UserDTO, status_code=201)
def create_user(request: UserPrivateDTO, service: UserService = Depends(get_user_service)):
    """Create a user. The password is accepted here and never echoed back."""
    try:
        return service.create_user(request)
    except DataConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/users/{user_id}", response_model=UserDTO)
def update_user(user_id: int, request: UserDTO, service: UserService = Depends(get_user_service)):
    """
    Update a user's name and email.

    Any id in the body is ignored in favour of the path parameter.
    """
    try:
        return service.update_user(user_id, request)
    except ObjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DataConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user permanently"""
    try:
        service.delete_user(user_id)
    except ObjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
