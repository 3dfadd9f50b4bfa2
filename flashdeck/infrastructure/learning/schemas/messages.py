"""Field validation messages reported for request bodies."""

ID_REQUIRED = "ID is required."
NAME_REQUIRED = "Name is required."
CATEGORY_ID_REQUIRED = "Category ID is required."
STUDY_SESSION_ID_REQUIRED = "Study session ID is required."
QUESTION_REQUIRED = "Question is required."
ANSWER_REQUIRED = "Answer is required."
