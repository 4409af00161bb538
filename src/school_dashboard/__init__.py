"""School Dashboard package.

Calendar aggregation and role-scoped statistics for the parent, teacher and
school-owner dashboards. Organized by feature modules (students, attendance,
events, payments, calendar, visibility, statistics, dashboard) with a thin
Flask controller layer on top.
"""
