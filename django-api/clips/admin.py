from django.contrib import admin

from clips.models import Clip


@admin.register(Clip)
class ClipAdmin(admin.ModelAdmin):
    list_display = ["title", "author_name", "like_count", "game_date", "created_at"]
    list_filter = ["game_date"]
    search_fields = ["title", "author_name"]
    readonly_fields = ["like_count", "liked_by"]
