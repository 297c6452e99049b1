from .common import iso


def normalize_user(user, admin=False):
    data = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
    }

    if admin:
        data["is_active"] = user.is_active
        data["created_at"] = iso(user.created_at)
        data["website_count"] = len(user.websites)

    return data
