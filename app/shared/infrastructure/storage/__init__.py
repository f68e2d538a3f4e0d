# 📄 File: app/shared/infrastructure/storage/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The file storage system that keeps profile photos and banners in the cloud.
#
# 🧪 Purpose (Technical Summary):
# Storage infrastructure package exposing the Supabase client and its dependency provider.
#
# 🔗 Dependencies:
# - supabase_storage.py, file_manager.py
#
# 🔄 Connected Modules / Calls From:
# - Profile photo, group banner and event banner endpoints

from .supabase_storage import SupabaseStorageClient, get_storage_client

__all__ = ["SupabaseStorageClient", "get_storage_client"]
