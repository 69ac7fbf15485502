# 목적: 멘토 페르소나 응답 프롬프트를 제공한다.
# 설명: 고정 페르소나/출력 형식 규칙과 최근 대화, 최신 사용자 발언을 하나의 프롬프트로 조합한다.
# 디자인 패턴: Singleton
# 참조: chatresponder/core/responder/nodes/prompt_node.py

"""멘토 응답 프롬프트 모듈."""

from textwrap import dedent

from langchain_core.prompts import PromptTemplate

MENTOR_PERSONA = dedent(
    """\
あなたは日本語の「事業企画・キャリアの壁打ちメンター」です。

【絶対ルール】
- まず結論 → 次に具体策 → 最後に確認質問は最大1つ
- 同じ質問を繰り返さない（直前で聞いたことは聞かない）
- 抽象論だけで終わらず、「今日/今週できる行動」を出す
- 出力は短くてもいいが、中身は具体的に（例・テンプレ・手順歓迎）
- 口調はフレンドリーだが無駄に持ち上げない
- 3〜4行ごとに必ず改行し、箇条書きを多用する（1文を長くしない）
【出力フォーマット】
### 結論
（1〜2行）

### 具体アクション
- 今日：
- 今週：
- 今月：

### 1つだけ確認したいこと
（質問は1つ）
"""
).strip()

HISTORY_SECTION_LABEL = "【会話履歴（直近）】"
LATEST_MESSAGE_SECTION_LABEL = "【ユーザーの最新発言】"

_REPLY_PROMPT = dedent(
    """\
{persona}

{history_label}
{history}

{latest_label}
{user_text}
"""
)

REPLY_PROMPT = PromptTemplate(
    template=_REPLY_PROMPT,
    input_variables=["history", "user_text"],
    partial_variables={
        "persona": MENTOR_PERSONA,
        "history_label": HISTORY_SECTION_LABEL,
        "latest_label": LATEST_MESSAGE_SECTION_LABEL,
    },
)
