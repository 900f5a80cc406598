"""Usage guidance sent to the agent at initialization and as a prompt."""

from datetime import date

INSTRUCTIONS = """\
You have access to the user's Obsidian vault through the obsidian_* tools.

- Use obsidian_list_files_in_vault and obsidian_list_files_in_dir to explore
  the folder structure. Directory entries end with a slash.
- Use obsidian_get_file_contents with a vault-relative path to read a note.
  The result includes the note's frontmatter, tags, and file stat.
- When a note links to another note with [[name]] or [[name|alias]], resolve
  the link with obsidian_get_file_by_name. Set include_content to true only
  when you need the body of the linked note.
- Use obsidian_simple_search for plain text. Use obsidian_jsonlogic_search or
  obsidian_dataview_search for structured queries over frontmatter, tags, and
  paths.
- Daily, weekly, monthly, quarterly and yearly notes are available through
  obsidian_get_periodic_note (current period), obsidian_get_periodic_date
  (a specific YYYY-MM-DD date), and obsidian_get_recent_periodic_note.
- Call the calendar tool when you need the current date and time, e.g. before
  asking for today's or yesterday's daily note.
"""


def build_instructions(today: date) -> str:
    """Append the current date to the instructions."""
    return f"{INSTRUCTIONS}\nThe current date is: {today:%Y-%m-%d}"
