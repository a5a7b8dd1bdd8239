import json
from typing import Iterable, Optional, Tuple

from cryptoquiz.models import QuestionItem


# Decimal math questions and comparisons
DEFAULT_QUESTIONS = [
    {
        'question': 'What is 0.6 × 0.2?',
        'choices': ['0.12', '0.08', '0.18', '1.2'],
        'answer': '0.12',
    },
    {
        'question': 'What is 3.6 ÷ 0.6?',
        'choices': ['6', '0.6', '0.12', '2'],
        'answer': '6',
    },
    {
        'question': 'Which is greater: 0.75 or 0.705?',
        'choices': ['0.75', '0.705', "They're equal", 'Cannot compare'],
        'answer': '0.75',
    },
    {
        'question': 'What is 1.2 × 0.5?',
        'choices': ['0.6', '0.24', '1.7', '0.7'],
        'answer': '0.6',
    },
    {
        'question': 'What is 2.4 ÷ 0.8?',
        'choices': ['3', '1.2', '2', '0.3'],
        'answer': '3',
    },
    {
        'question': 'Is 0.9 less than, greater than, or equal to 0.99?',
        'choices': ['Less than', 'Greater than', 'Equal to'],
        'answer': 'Less than',
    },
    {
        'question': 'What is 0.15 × 0.4?',
        'choices': ['0.06', '0.6', '0.015', '0.004'],
        'answer': '0.06',
    },
    {
        'question': 'Which is equal: 0.7 or 0.70?',
        'choices': ['0.7', '0.70', "They're equal", 'Cannot compare'],
        'answer': "They're equal",
    },
    {
        'question': 'What is 4.2 ÷ 0.7?',
        'choices': ['6', '0.6', '0.42', '7'],
        'answer': '6',
    },
    {
        'question': 'Is 0.33 greater than, less than, or equal to 1/3?',
        'choices': ['Greater than', 'Less than', 'Equal to'],
        'answer': 'Less than',
    },
]


def build_question_bank(raw_items: Iterable[dict]) -> Tuple[QuestionItem, ...]:
    """Turn raw `{question, choices, answer}` dicts into an immutable bank.

    Raises ValueError on a malformed item or an empty bank; the bank is
    static, so a bad file should stop the server from starting.
    """
    bank = []
    for pos, item in enumerate(raw_items, start=1):
        try:
            bank.append(QuestionItem(
                prompt=str(item['question']),
                choices=tuple(str(c) for c in item['choices']),
                correct_choice=str(item['answer']),
            ))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"question #{pos} is malformed: {exc}") from exc
    if not bank:
        raise ValueError('question bank is empty')
    return tuple(bank)


def load_question_bank(path: Optional[str] = None) -> Tuple[QuestionItem, ...]:
    if not path:
        return build_question_bank(DEFAULT_QUESTIONS)
    with open(path, encoding='utf-8') as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of questions")
    return build_question_bank(data)
