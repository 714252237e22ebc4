"""
Unit tests for the Q&A models (Question, Answer, Comment, Tag) and their
response schemas.
"""
import datetime as dt

import pytest
from tortoise.exceptions import IntegrityError

from fakeso.models import Answer, Comment, Question, Tag
from fakeso.schemas.question import QuestionOut


pytestmark = pytest.mark.asyncio

UTC = dt.timezone.utc


async def make_question(title: str = "Quick question about storage on android", asked_by: str = "q_by1") -> Question:
    return await Question.create(
        title=title,
        text="I would like to know the best way to go about storing an array on an android phone",
        asked_by=asked_by,
        ask_date_time=dt.datetime(2023, 11, 16, 9, 24, tzinfo=UTC),
        views=["question1_user", "question2_user"],
    )


async def test_question_defaults(db):
    question = await Question.create(
        title="Unanswered Question #2",
        text="Does something like that exist?",
        asked_by="q_by4",
        ask_date_time=dt.datetime(2023, 11, 20, 9, 24, tzinfo=UTC),
    )
    fetched = await Question.get(id=question.id)
    assert fetched.views == []
    assert fetched.up_votes == []
    assert fetched.down_votes == []
    assert await fetched.tags.all().count() == 0


async def test_tag_names_are_unique(db):
    await Tag.create(name="react", description="React is a JavaScript library")
    with pytest.raises(IntegrityError):
        await Tag.create(name="react", description="duplicate")


async def test_tags_are_shared_between_questions(db):
    android = await Tag.create(name="android", description="Android OS")
    q1 = await make_question()
    q2 = await make_question(title="Object storage for a web application", asked_by="q_by2")
    await q1.tags.add(android)
    await q2.tags.add(android)

    tagged = await android.questions.all()
    assert {q.id for q in tagged} == {q1.id, q2.id}


async def test_question_out_embeds_relations(db):
    question = await make_question()
    android = await Tag.create(name="android", description="Android OS")
    javascript = await Tag.create(name="javascript", description="JS")
    later = await Answer.create(text="ans2", ans_by="ansBy2", ans_date_time=dt.datetime(2023, 11, 20, 9, 24, tzinfo=UTC))
    earlier = await Answer.create(text="ans1", ans_by="ansBy1", ans_date_time=dt.datetime(2023, 11, 18, 9, 24, tzinfo=UTC))
    comment = await Comment.create(text="com1", comment_by="com_by1", comment_date_time=dt.datetime(2023, 11, 18, 9, 25, tzinfo=UTC))
    await earlier.comments.add(comment)
    await question.tags.add(android, javascript)
    await question.answers.add(later, earlier)
    question.up_votes = ["voter1"]
    await question.save()

    out = await QuestionOut.load(await Question.get(id=question.id))
    dumped = out.model_dump(mode="json", by_alias=True)

    assert dumped["_id"] == str(question.id)
    assert dumped["askedBy"] == "q_by1"
    assert {t["name"] for t in dumped["tags"]} == {"android", "javascript"}
    assert [a["text"] for a in dumped["answers"]] == ["ans1", "ans2"]
    assert dumped["answers"][0]["comments"][0]["text"] == "com1"
    assert dumped["answers"][0]["comments"][0]["commentBy"] == "com_by1"
    assert dumped["answers"][1]["comments"] == []
    assert dumped["views"] == ["question1_user", "question2_user"]
    assert dumped["upVotes"] == ["voter1"]
    assert dumped["downVotes"] == []
    assert dumped["comments"] == []


async def test_comment_can_belong_to_question(db):
    question = await make_question()
    comment = await Comment.create(text="nice question", comment_by="reader", comment_date_time=dt.datetime(2023, 11, 17, tzinfo=UTC))
    await question.comments.add(comment)

    out = await QuestionOut.load(question)

    assert [c.text for c in out.comments] == ["nice question"]
    assert [q.id for q in await comment.questions.all()] == [question.id]
