"""测试配置和共享 Fixtures。"""

import json

import pytest

from set_signature.models import (
    ComposeCategory,
    TemplateId,
    TemplatePreference,
    UserProfile,
)
from set_signature.services import QuoteService, SignatureService


# ============================================================================
# Mock Services
# ============================================================================

class MockRandom:
    """测试用 Mock 随机数源。

    可以通过设置 coin 属性来控制 random() 的返回值（< 0.5 选第一组）。
    可以通过设置 index 来控制 choice() 选中的位置。
    """

    def __init__(self):
        self.coin = 0.0
        self.index = 0
        self.choice_calls = []

    def random(self) -> float:
        return self.coin

    def choice(self, seq):
        self.choice_calls.append(list(seq))
        return seq[self.index % len(seq)]


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def jane_profile() -> UserProfile:
    """创建示例 Profile（无链接、无名言）。"""
    return UserProfile(
        name="Jane Doe",
        job_title="Analyst",
        email="jane@x.com",
        greeting="Hi",
    )


@pytest.fixture
def full_profile() -> UserProfile:
    """创建所有字段都填写的 Profile。"""
    return UserProfile(
        name="Sam Lee",
        job_title="Principal Analyst",
        email="sam@example.com",
        phone="+1 617 555 0100",
        blog_link="https://blog.example.com/sam",
        linkedin_link="https://linkedin.com/in/samlee",
        follow_research_link="https://example.com/research/sam",
        greeting="Best regards,",
        group1_quotes="Talk is cheap. Show me the code.\nPremature optimization is the root of all evil.",
        group2_quotes="The unexamined life is not worth living.",
    )


@pytest.fixture
def minimal_profile() -> UserProfile:
    """创建只包含必填字段的 Profile（用于边界测试）。"""
    return UserProfile(
        name="Min User",
        job_title="Engineer",
        email="min@example.com",
    )


# ============================================================================
# Preference Fixtures
# ============================================================================

@pytest.fixture
def mixed_prefs() -> TemplatePreference:
    """新邮件用 A，回复和转发用 B。"""
    return TemplatePreference(choices={
        ComposeCategory.NEW_MESSAGE: TemplateId.TEMPLATE_A,
        ComposeCategory.REPLY: TemplateId.TEMPLATE_B,
        ComposeCategory.FORWARD: TemplateId.TEMPLATE_B,
    })


@pytest.fixture
def template_a_prefs() -> TemplatePreference:
    """所有场景都使用 A。"""
    return TemplatePreference(choices={c: TemplateId.TEMPLATE_A for c in (
        ComposeCategory.NEW_MESSAGE,
        ComposeCategory.REPLY,
        ComposeCategory.FORWARD,
    )})


@pytest.fixture
def template_b_prefs() -> TemplatePreference:
    """所有场景都使用 B。"""
    return TemplatePreference(choices={c: TemplateId.TEMPLATE_B for c in (
        ComposeCategory.NEW_MESSAGE,
        ComposeCategory.REPLY,
        ComposeCategory.FORWARD,
    )})


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_random() -> MockRandom:
    """创建 Mock 随机数源。"""
    return MockRandom()


@pytest.fixture
def quote_service(mock_random: MockRandom) -> QuoteService:
    """创建使用 Mock 随机数源的 QuoteService。"""
    return QuoteService(rng=mock_random, pool1_weight=0.5)


@pytest.fixture
def signature_service(quote_service: QuoteService) -> SignatureService:
    """创建非严格模式的 SignatureService。"""
    return SignatureService(quote_service=quote_service, strict=False)


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def saved_settings(full_profile: UserProfile) -> dict:
    """模拟已保存的 roaming settings（legacy snake_case 字段名）。"""
    return {
        "user_info": json.dumps({
            "name": full_profile.name,
            "job": full_profile.job_title,
            "email": full_profile.email,
            "phone": full_profile.phone,
            "blog_link": full_profile.blog_link,
            "linkedin_link": full_profile.linkedin_link,
            "follow_reseach_link": full_profile.follow_research_link,
            "greeting": full_profile.greeting,
            "nerdy_quotes": full_profile.group1_quotes,
            "philosophical_quotes": full_profile.group2_quotes,
        }),
        "newMail": "templateA",
        "reply": "templateB",
        "forward": "templateB",
    }
