"""
UI Module - display slots for the profile header

Widgets here hold projected state only; Discord rendering lives in
profilebot.utils.embeds and profilebot.views.header.
"""
