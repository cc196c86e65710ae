import os
import json
from typing import Dict, Any, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_TITLE = "Design Patterns Demo - 23 GoF Patterns"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    加載配置文件
    
    Args:
        config_path: 配置文件路徑，如果為None則使用默認值
        
    Returns:
        配置字典
    """
    default_config = {
        "log_level": os.environ.get("DESIGN_PATTERNS_LOG_LEVEL", "WARNING"),
        "clear_screen": True,
        "title": DEFAULT_TITLE
    }
    
    if not config_path or not os.path.exists(config_path):
        return default_config
    
    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            user_config = json.load(file)
        if not isinstance(user_config, dict):
            raise ValueError("配置文件的頂層必須是 JSON 物件")
        # 合併默認配置和用戶配置
        return {**default_config, **user_config}
    except (OSError, ValueError) as e:
        print(f"警告: 讀取配置文件時出錯: {str(e)}，使用默認配置")
        return default_config
