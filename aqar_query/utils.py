import os
from datetime import datetime

import pandas as pd

from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)


def get_now_for_filename():
    date = datetime.now()
    formatted_date = date.strftime("%Y_%m_%d_%H_%M_%S")
    return formatted_date


def save_df_to_csv(
    df,
    result_data_path,
    date_for_name,
    name,
):
    if not os.path.exists(result_data_path):
        os.makedirs(result_data_path)

    result_file_name = os.path.join(result_data_path, f"{date_for_name}_{name}.csv")

    if df.empty:
        logger.warning(f"Dataframe is empty, not saving to {result_file_name}")
        return False

    logger.info(f"Saving {df.shape[0]} rows and {df.shape[1]} columns to {result_file_name}")

    df.to_csv(
        result_file_name,
        index=False,
        encoding="utf-8",
    )

    return True


def convert_to_df(filters: list) -> pd.DataFrame:
    data_dicts = [extracted.to_query_dict() for extracted in filters]
    return pd.DataFrame(data_dicts)
