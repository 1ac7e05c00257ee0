from django.contrib import admin

from signups.models import Signup


@admin.register(Signup)
class SignupAdmin(admin.ModelAdmin):
    list_display = ["display_name", "date", "is_guest", "sponsor_name", "created_at"]
    list_filter = ["date", "is_guest"]
    search_fields = ["display_name", "email", "sponsor_name"]
