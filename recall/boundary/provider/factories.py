"""
LangChain Gemini client factories.

Dependencies: langchain_google_genai
System role: Construction of provider SDK clients
"""

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

# Retries inside the SDK would eat into the generation timeout
CHAT_MAX_RETRIES = 1


def build_chat_model(model: str, api_key: str | None, temperature: float = 0.0) -> ChatGoogleGenerativeAI:
    """
    Create a Gemini chat model client.

    Args:
        model: Gemini chat model identifier
        api_key: Gemini API key
        temperature: Sampling temperature

    Returns:
        ChatGoogleGenerativeAI: LangChain chat model
    """
    return ChatGoogleGenerativeAI(
        model=model,
        google_api_key=api_key,
        temperature=temperature,
        max_retries=CHAT_MAX_RETRIES,
    )


def build_embeddings(model: str, api_key: str | None) -> GoogleGenerativeAIEmbeddings:
    """
    Create a Gemini embeddings client.

    Args:
        model: Gemini embedding model identifier
        api_key: Gemini API key

    Returns:
        GoogleGenerativeAIEmbeddings: LangChain embeddings client
    """
    return GoogleGenerativeAIEmbeddings(model=model, google_api_key=api_key)
