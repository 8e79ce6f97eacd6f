from fastapi import APIRouter, Depends
from typing import List

from dependencies import get_directory, verify_admin_access
from helpers.directory import list_all_accounts
from models import DEFAULT_PHOTO_URL
from schemas.common import MessageResponse
from schemas.users import UidListRequest, UserResponse

router = APIRouter(
    prefix="/api/users",
    dependencies=[Depends(verify_admin_access)],
    tags=["Users"],
)


@router.get("", response_model=List[UserResponse])
def get_users(directory=Depends(get_directory)):
    return [
        UserResponse(
            uid=account.uid,
            email=account.email,
            display_name=account.display_name,
            disabled=account.disabled,
            photo_url=account.photo_url or DEFAULT_PHOTO_URL,
            admin=account.admin,
        )
        for account in list_all_accounts(directory)
    ]


@router.post("/disable", response_model=MessageResponse)
def disable_users(request: UidListRequest, directory=Depends(get_directory)):
    directory.set_disabled(request.uid, True)
    return {"message": f"Disabled {len(request.uid)} users successfully"}


@router.post("/enable", response_model=MessageResponse)
def enable_users(request: UidListRequest, directory=Depends(get_directory)):
    directory.set_disabled(request.uid, False)
    return {"message": f"Enabled {len(request.uid)} users successfully"}


@router.post("/delete", response_model=MessageResponse)
def delete_users(request: UidListRequest, directory=Depends(get_directory)):
    directory.delete(request.uid)
    return {"message": f"Deleted {len(request.uid)} users successfully"}


@router.post("/set-admin", response_model=MessageResponse)
def set_admin(request: UidListRequest, directory=Depends(get_directory)):
    directory.set_admin(request.uid, True)
    return {"message": f"Set {len(request.uid)} users as admin successfully"}


@router.post("/remove-admin", response_model=MessageResponse)
def remove_admin(request: UidListRequest, directory=Depends(get_directory)):
    directory.set_admin(request.uid, False)
    return {"message": f"Removed {len(request.uid)} users as admin successfully"}
