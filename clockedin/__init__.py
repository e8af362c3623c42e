"""Day, week, month and year progress for the working day."""
