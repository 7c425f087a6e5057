# Supabase Auth
# Admin accounts are Supabase Auth users; the matching public.admins row
# (same id) carries the dashboard role. See app/modules/admins/models.py.

"""
Supabase Auth calls used by this backend:
- auth.sign_in_with_password() - admin login, returns the session access token
- auth.get_user(jwt) - resolve the caller from the session cookie / bearer token
- auth.admin.create_user() / delete_user() - admin account management (service role)
- auth.admin.update_user_by_id() - password change and temporary password reset (service role)
- auth.admin.sign_out(jwt) - revoke a session on logout (service role)
"""
