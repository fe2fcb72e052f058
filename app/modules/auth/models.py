# Users live in Supabase Auth (auth.users); no application table.
# The dashboard role is stored server-side in app_metadata so users cannot change it.

"""
Expected app_metadata shape:

{
    "role": "admin" | "manager" | "publisher" | "advertiser" | "viewer"
}

A user without a role, or with a value outside that set, is refused (403).
"""
