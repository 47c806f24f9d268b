"""Worker account endpoints and per-user listings."""

from fastapi import APIRouter, Depends

from app.core.money import from_cents
from app.interfaces.http.deps import (
    get_balance_service,
    get_checkout_service,
    get_task_service,
    get_user_service,
)
from app.modules.balances.service import BalanceService
from app.modules.checkouts.service import CheckoutService
from app.modules.tasks.service import TaskService
from app.modules.users import UserCreateInput
from app.modules.users.service import UserService
from app.schemas import (
    BalanceEntryListResponse,
    BalanceEntryResponse,
    CheckoutResponse,
    TaskResponse,
    UserCreate,
    UserCreateResponse,
    UserResponse,
)

router = APIRouter()


@router.post(
    "/users",
    response_model=UserCreateResponse,
    summary="Register a worker account",
)
async def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserCreateResponse:
    user = await service.create_user(UserCreateInput(full_name=payload.full_name, email=payload.email))
    return UserCreateResponse(id=user.id, role=user.role)


@router.get("/users", response_model=list[UserResponse], summary="List worker accounts")
async def list_users(service: UserService = Depends(get_user_service)) -> list[UserResponse]:
    return [UserResponse.from_domain(user) for user in await service.list_users()]


@router.get("/user/{user_id}", response_model=UserResponse, summary="Get a worker account")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserResponse:
    return UserResponse.from_domain(await service.require(user_id))


@router.get("/user/{user_id}/tasks", response_model=list[TaskResponse], summary="List tasks assigned to a worker")
async def list_user_tasks(
    user_id: str,
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    return [TaskResponse.from_domain(task) for task in await service.list_for_user(user_id)]


@router.get(
    "/user/{user_id}/withdrawals",
    response_model=list[CheckoutResponse],
    summary="List a worker's checkout requests",
)
async def list_user_withdrawals(
    user_id: str,
    service: CheckoutService = Depends(get_checkout_service),
) -> list[CheckoutResponse]:
    return [CheckoutResponse.from_domain(checkout) for checkout in await service.list_for_user(user_id)]


@router.get("/user/{user_id}/ledger", response_model=BalanceEntryListResponse, summary="List balance movements")
async def list_user_ledger(
    user_id: str,
    limit: int = 50,
    offset: int = 0,
    users: UserService = Depends(get_user_service),
    balances: BalanceService = Depends(get_balance_service),
) -> BalanceEntryListResponse:
    user = await users.require(user_id)
    entries = await balances.list_entries(user.id, limit, offset)
    return BalanceEntryListResponse(
        balance=from_cents(user.balance_cents),
        entries=[BalanceEntryResponse.from_domain(entry) for entry in entries],
    )
