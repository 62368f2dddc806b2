"""
Grounded answer prompt.

Enumerates retrieved chunks as numbered sources and instructs the model to
answer only from them, citing by source number.

Dependencies: langchain_core.prompts
System role: Prompt template for answer synthesis
"""

from collections.abc import Sequence

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from recall.models.retrieval import RetrievalResult

NOT_FOUND_PHRASE = "I don't have information about that in your saved notes"

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("human", """You are a helpful AI Knowledge Assistant that ONLY answers based on the provided context from the user's saved notes.

STRICT RULES:
1. ONLY use information from the context below - do not add external knowledge
2. If the answer is NOT in the context, clearly state "{not_found}"
3. Always cite sources by referencing the Source numbers (e.g., "According to Source 1...")
4. Be concise and directly answer the question
5. If the context is not relevant to the question, clearly say so

Context:
{context}

User Question: {question}

Your Answer:"""),
])


def format_context(results: Sequence[RetrievalResult]) -> str:
    """Render results as ``[Source N: label]`` blocks separated by blank lines."""
    return "\n\n".join(
        f"[Source {index}: {result.source}]\n{result.content}"
        for index, result in enumerate(results, start=1)
    )


def build_answer_messages(question: str, results: Sequence[RetrievalResult]) -> list[BaseMessage]:
    """
    Build the prompt messages for a question.

    Args:
        question: User question
        results: Retrieved chunks, in citation order

    Returns:
        list[BaseMessage]: Messages ready for the chat model
    """
    return ANSWER_PROMPT.invoke({
        "context": format_context(results),
        "question": question,
        "not_found": NOT_FOUND_PHRASE,
    }).to_messages()
