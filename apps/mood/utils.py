# apps/mood/utils.py

MOOD_LABELS = ['Upset', 'Sad', 'Neutral', 'Good', 'Happy']

MIN_SCORE = 1
MAX_SCORE = len(MOOD_LABELS)


def label_for_score(score: int) -> str:
    """
    Returns the mood label for a 1-5 score. Out-of-range scores are clamped
    to the nearest end of the scale.
    """
    index = min(max(int(score), MIN_SCORE), MAX_SCORE) - 1
    return MOOD_LABELS[index]


def summarize_scores(scores):
    """
    Average of the given scores rounded to one decimal, with the label of the
    rounded average. Both are None when there are no scores.
    """
    scores = list(scores)
    if not scores:
        return None, None
    average = round(sum(scores) / len(scores), 1)
    return average, label_for_score(round(average))
