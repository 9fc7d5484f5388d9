# mealsync

Business rules for running meal events in an office: menu items and menu
sets, meal events and the menu sets offered at them, meal requests made by
users, comments on menu items, event addresses and per-user notifications.

The package holds only the service layer. Each service is built from
repository objects that you pass in, so the same rules run against a
database, an in-memory store or a test double. It has no third-party
dependencies.

## Installation

```
pip install mealsync
```

For running the tests:

```
pip install "mealsync[test]"
pytest
```

## Services

| Module | Class | What it handles |
| --- | --- | --- |
| `mealsync.event_address` | `EventAddressService` | addresses where events take place |
| `mealsync.meal_comment` | `MenuItemCommentService` | comments and ratings on menu items |
| `mealsync.meal_event` | `MealEventService` | meal events, their menu sets, requests and comments |
| `mealsync.menu_item` | `MenuItemService` | individual dishes |
| `mealsync.menu_set` | `MenuSetService` | menu sets and the items in them |
| `mealsync.meal_request` | `MealRequestService` | users' requests for a meal and their items |
| `mealsync.notification` | `NotificationService` | notifications for users |

Shared types live in `mealsync.common`: the error classes, `UserRole`,
`NotificationType`, the `Notification` and `MenuSetItem` dataclasses, and
the helpers `get_user_id_from_context` and `is_admin_from_context`.

## Repositories and records

Services call plain methods on the repositories you give them, such as
`find_by_id`, `find_active`, `create`, `update` and `delete`, plus a few
specific ones (`find_by_meal_event_id`, `find_request_items`,
`mark_as_read`, `add_menu_item` and so on). `find_by_id` is expected to
return `None` when the record does not exist; the services turn that into
`NotFoundError`.

Records are any objects with the attributes the services read and set
(`user_id`, `meal_event_id`, `created_by`, `updated_by`, `cutoff_time`,
`is_active`, ...). Your own dataclasses work. The package itself builds
only `Notification` (in `NotificationService`) and `MenuSetItem` (in
`MenuSetService`).

A few rules worth knowing:

- `MealRequestService` refuses to create, update or delete a request once
  the meal's `cutoff_time` has passed, refuses to create or update one for
  an inactive meal, and allows only one request per user and meal event.
  Users may touch only their own requests unless `is_admin` is true;
  `update_request_status` requires the user's `role` to be `"admin"`.
- `MenuItemCommentService` lets only a comment's author edit or delete it.
- `NotificationService` lets only the owner mark as read, mark as
  delivered or delete a notification; a mismatch raises `ValidationError`.
  The `create_meal_*_notification` and `create_admin_notification` methods
  store a `Notification` whose `payload` is compact JSON with sorted keys;
  the reminder's `deadline` is written as an RFC 3339 timestamp. The
  cancellation notification uses `NotificationType.CONFIRMATION`.
- `MenuItemService.get_menu_items_by_category` returns all active items;
  items carry no category.

## Errors

Rules are reported by raising a subclass of `ServiceError`, which carries a
`message` and, where there was one, the `cause`:

- `ValidationError`: missing or invalid input, an inactive event, a passed
  cutoff time, a duplicate request, a notification owned by someone else;
- `NotFoundError`: the record asked for does not exist;
- `ForbiddenError`: the user may not touch someone else's data;
- `UnauthorizedError`: no user in the request context;
- `InternalError`: raised by `EventAddressService` when its repository
  fails while storing or fetching.

Other services let exceptions from their repositories pass through
unchanged.

```python
from mealsync.common import ValidationError
from mealsync.menu_item import MenuItemService

service = MenuItemService(menu_item_repo, user_repo)

try:
    service.create_menu_item(item, user_id=7)
except ValidationError as exc:
    print(exc.message)   # e.g. "name is required"
```

## Request context

```python
from mealsync.common import get_user_id_from_context, is_admin_from_context

context = {"user_id": 7, "role": "admin"}
get_user_id_from_context(context)   # 7
is_admin_from_context(context)      # True
```

`get_user_id_from_context` raises `UnauthorizedError` when there is no
`"user_id"` key. `is_admin_from_context` accepts the role as the string
`"admin"` or as `UserRole.ADMIN`, and returns `False` when no role is set.

## What the package does not do

There is no storage, no HTTP API or server, no command-line tool, and no
user registration, login or token handling. You supply the repositories
and whatever front end calls the services.